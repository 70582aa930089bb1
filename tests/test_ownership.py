"""Tests for the article ownership gate."""

import pytest

from src.errors import AuthorizationError, NotFoundError
from src.models.article import Article
from src.models.user import User
from src.services.article_service import get_article_author_id
from src.services.auth import check_article_ownership


@pytest.fixture
def authors(db):
    """Two users, the first owning one article."""
    owner = User(username="owner", email="owner@example.com", password_hash="fake")
    other = User(username="other", email="other@example.com", password_hash="fake")
    db.add_all([owner, other])
    db.flush()

    article = Article(
        author_id=owner.id,
        title="Owned",
        content="Body",
        summary="Body...",
        category="general",
    )
    db.add(article)
    db.commit()

    return {"owner": owner, "other": other, "article": article}


def test_author_id_lookup(db, authors):
    """Test looking up the author of an article."""
    assert get_article_author_id(db, authors["article"].id) == authors["owner"].id
    assert get_article_author_id(db, 999999) is None


def test_owner_passes(db, authors):
    """Test the author passing the gate."""
    check_article_ownership(db, authors["article"].id, authors["owner"].id)


def test_other_user_is_forbidden(db, authors):
    """Test another user being refused."""
    with pytest.raises(AuthorizationError) as exc_info:
        check_article_ownership(db, authors["article"].id, authors["other"].id)
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Forbidden: You are not the author"


def test_missing_article_is_not_found(db, authors):
    """Nonexistent articles are 404 for every actor."""
    for actor in (authors["owner"], authors["other"]):
        with pytest.raises(NotFoundError):
            check_article_ownership(db, 999999, actor.id)


def test_string_actor_id_rejected(db, authors):
    """Ids must already be ints; a string never matches by coercion."""
    with pytest.raises(TypeError):
        check_article_ownership(db, authors["article"].id, str(authors["owner"].id))


def test_update_as_author_and_non_author(client, auth_headers, other_auth_headers):
    """Update as another user is 403, as the author is 200."""
    created = client.post(
        "/api/articles",
        headers=auth_headers,
        json={"title": "t", "content": "c", "category": "c"},
    )
    article_id = created.json()["articleId"]
    body = {"title": "t2", "content": "c2", "category": "c2"}

    url = f"/api/articles/{article_id}"
    assert client.put(url, headers=other_auth_headers, json=body).status_code == 403
    assert client.put(url, headers=auth_headers, json=body).status_code == 200
