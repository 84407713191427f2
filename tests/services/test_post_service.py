"""Tests for post persistence, the vote-count aggregate and upvoting."""

import datetime

import pytest

from tech_news.db.errors import ForeignKeyViolation, ValidationError
from tech_news.models import Comment, Post, Vote
from tech_news.services import post_service


def _add_votes(db_session, post, user, n: int) -> None:
    db_session.add_all([Vote(user_id=user.id, post_id=post.id) for _ in range(n)])
    db_session.commit()


def test_create_post(db_session, test_user) -> None:
    post = post_service.create_post(
        db_session,
        {"title": "t", "post_url": "http://x.com", "user_id": test_user.id},
    )

    assert post.id is not None
    assert post.user_id == test_user.id
    assert post.created_at is not None
    assert post.vote_count == 0


@pytest.mark.parametrize("url", ["not a url", "taskmaster", "ftp://files.example.com/x"])
def test_create_post_rejects_malformed_url(db_session, test_user, url) -> None:
    with pytest.raises(ValidationError):
        post_service.create_post(db_session, {"title": "t", "post_url": url, "user_id": test_user.id})


def test_create_post_requires_title(db_session, test_user) -> None:
    with pytest.raises(ValidationError):
        post_service.create_post(db_session, {"post_url": "https://x.com", "user_id": test_user.id})

    assert db_session.query(Post).count() == 0


def test_create_post_rejects_unknown_author(db_session) -> None:
    with pytest.raises(ForeignKeyViolation):
        post_service.create_post(db_session, {"title": "t", "post_url": "https://x.com", "user_id": 404})


def test_vote_count_matches_vote_rows(db_session, test_user, other_user, test_post) -> None:
    quiet = Post(title="quiet", post_url="https://quiet.dev", user_id=other_user.id)
    db_session.add(quiet)
    db_session.commit()
    _add_votes(db_session, test_post, test_user, 2)
    _add_votes(db_session, test_post, other_user, 1)

    listed = {post.id: post.vote_count for post in post_service.get_posts(db_session)}

    assert listed == {test_post.id: 3, quiet.id: 0}
    assert post_service.get_post(db_session, test_post.id).vote_count == 3
    assert post_service.count_votes(db_session, test_post.id) == 3
    assert len(post_service.votes_for_post(db_session, test_post.id)) == 3


def test_count_votes_unknown_post(db_session) -> None:
    assert post_service.count_votes(db_session, 999) == 0


def test_get_post_missing_returns_none(db_session) -> None:
    assert post_service.get_post(db_session, 999) is None


def test_get_posts_newest_first(db_session, test_user) -> None:
    base = datetime.datetime(2024, 1, 1, 12, 0, 0)
    for offset, title in [(1, "middle"), (2, "newest"), (0, "oldest")]:
        db_session.add(
            Post(
                title=title,
                post_url="https://x.com",
                user_id=test_user.id,
                created_at=base + datetime.timedelta(hours=offset),
            )
        )
    db_session.commit()

    posts = post_service.get_posts(db_session)

    assert [p.title for p in posts] == ["newest", "middle", "oldest"]
    for newer, older in zip(posts, posts[1:]):
        assert newer.created_at >= older.created_at
    assert posts[0].user.username == test_user.username


def test_identical_timestamps_fall_back_to_newest_id(db_session, test_user) -> None:
    stamp = datetime.datetime(2024, 1, 1)
    first = Post(title="first", post_url="https://x.com", user_id=test_user.id, created_at=stamp)
    second = Post(title="second", post_url="https://x.com", user_id=test_user.id, created_at=stamp)
    db_session.add(first)
    db_session.commit()
    db_session.add(second)
    db_session.commit()

    assert [p.title for p in post_service.get_posts(db_session)] == ["second", "first"]


def test_upvote_increments_by_exactly_one(db_session, test_user, test_post) -> None:
    before = post_service.get_post(db_session, test_post.id).vote_count

    post = post_service.upvote(db_session, user_id=test_user.id, post_id=test_post.id)

    assert post.id == test_post.id
    assert post.vote_count == before + 1
    assert post_service.get_post(db_session, test_post.id).vote_count == before + 1


def test_repeated_upvotes_are_counted_as_separate_events(db_session, test_user, test_post) -> None:
    post_service.upvote(db_session, user_id=test_user.id, post_id=test_post.id)
    post = post_service.upvote(db_session, user_id=test_user.id, post_id=test_post.id)

    assert post.vote_count == 2
    assert len(post_service.votes_by_user(db_session, test_user.id)) == 2


@pytest.mark.parametrize("bad", ["user", "post"])
def test_upvote_with_unknown_reference_creates_nothing(db_session, test_user, test_post, bad) -> None:
    user_id = 9999 if bad == "user" else test_user.id
    post_id = 9999 if bad == "post" else test_post.id

    with pytest.raises(ForeignKeyViolation):
        post_service.upvote(db_session, user_id=user_id, post_id=post_id)

    assert db_session.query(Vote).count() == 0


def test_upvote_requires_both_ids(db_session, test_user) -> None:
    with pytest.raises(ValidationError):
        post_service.upvote(db_session, user_id=test_user.id, post_id=None)

    assert db_session.query(Vote).count() == 0


def test_update_post_title(db_session, test_post) -> None:
    assert post_service.update_post(db_session, test_post.id, "Renamed") == 1
    assert post_service.get_post(db_session, test_post.id).title == "Renamed"
    assert post_service.update_post(db_session, 999, "Nope") == 0


def test_update_post_requires_title(db_session, test_post) -> None:
    with pytest.raises(ValidationError):
        post_service.update_post(db_session, test_post.id, None)


def test_delete_post_cascades_votes_and_comments(db_session, test_user, test_post, test_comment) -> None:
    _add_votes(db_session, test_post, test_user, 2)
    post_id = test_post.id

    assert post_service.delete_post(db_session, post_id) == 1

    assert post_service.get_post(db_session, post_id) is None
    assert db_session.query(Vote).count() == 0
    assert db_session.query(Comment).count() == 0
    assert post_service.delete_post(db_session, post_id) == 0


def test_posts_by_user(db_session, test_user, other_user, test_post) -> None:
    assert [p.id for p in post_service.posts_by_user(db_session, test_user.id)] == [test_post.id]
    assert post_service.posts_by_user(db_session, other_user.id) == []


def test_home_posts_include_comments_and_authors(db_session, test_user, other_user, test_post, test_comment) -> None:
    _add_votes(db_session, test_post, other_user, 1)

    (post,) = post_service.get_home_posts(db_session)

    assert post.vote_count == 1
    assert post.user.username == test_user.username
    assert [c.comment_text for c in post.comments] == ["Great read"]
    assert post.comments[0].user.username == other_user.username
