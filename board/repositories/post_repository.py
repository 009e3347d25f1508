from sqlalchemy import func, select

from board.db import db, in_id_range
from board.models.comment_model import Comment
from board.models.post_model import Post
from board.models.user_model import User
from board.repositories.vote_repository import delete_votes_for_targets, vote_columns


def create_post(user_id, title, text=None, url=None):
    post = Post(
        user_id=user_id,
        title=title,
        text=text,
        url=url,
    )
    db.session.add(post)
    db.session.flush()

    return post


def get_post(post_id: int):
    if not in_id_range(post_id):
        return None
    return db.session.get(Post, post_id)


def _post_query(viewer_id=None):
    comment_count = (
        select(func.count(Comment.id))
        .where(Comment.post_id == Post.id)
        .scalar_subquery()
        .label("comment_count")
    )

    return (
        db.session.query(
            Post,
            User.username,
            comment_count,
            *vote_columns("post", Post.id, viewer_id),
        )
        .join(User, User.id == Post.user_id)
    )


def _row_to_dict(row):
    post, username, comment_count, upvotes, downvotes, vote_status = row
    return {
        "id": post.id,
        "user_id": post.user_id,
        "title": post.title,
        "text": post.text,
        "url": post.url,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "username": username,
        "comment_count": comment_count or 0,
        "upvotes": upvotes or 0,
        "downvotes": downvotes or 0,
        "vote_status": vote_status,
    }


def get_post_with_stats(post_id: int, viewer_id=None):
    if not in_id_range(post_id):
        return None
    row = _post_query(viewer_id).filter(Post.id == post_id).first()
    if row is None:
        return None
    return _row_to_dict(row)


def list_posts_with_stats(viewer_id=None):
    rows = (
        _post_query(viewer_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )
    return [_row_to_dict(row) for row in rows]


def update_post(post, changes: dict):
    for field, value in changes.items():
        setattr(post, field, value)
    db.session.flush()
    return post


def delete_post(post):
    comment_ids = [
        comment_id for (comment_id,) in
        db.session.query(Comment.id).filter(Comment.post_id == post.id)
    ]
    delete_votes_for_targets("comment", comment_ids)
    delete_votes_for_targets("post", [post.id])
    db.session.delete(post)
