from board.db import db, in_id_range
from board.errors import NotFoundError
from board.models.comment_model import Comment
from board.models.user_model import User
from board.repositories.post_repository import get_post
from board.repositories.vote_repository import delete_votes_for_targets, vote_columns


def create_comment(user_id, post_id, comment, parent_id=None):
    post = get_post(post_id)
    if not post:
        raise NotFoundError("Post not found")

    if parent_id is not None:
        parent = get_comment(parent_id)
        if not parent or parent.post_id != post_id:
            raise NotFoundError("Parent comment not found")

    row = Comment(
        user_id=user_id,
        post_id=post_id,
        parent_id=parent_id,
        comment=comment
    )

    db.session.add(row)
    db.session.flush()
    return row


def get_comment(comment_id: int):
    if not in_id_range(comment_id):
        return None
    return db.session.get(Comment, comment_id)


def get_comments_by_post(post_id, viewer_id=None):
    rows = (
        db.session.query(
            Comment,
            User.username,
            *vote_columns("comment", Comment.id, viewer_id),
        )
        .join(User, User.id == Comment.user_id)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )

    comments = []
    for comment, username, upvotes, downvotes, vote_status in rows:
        comments.append({
            "id": comment.id,
            "post_id": comment.post_id,
            "user_id": comment.user_id,
            "parent_id": comment.parent_id,
            "comment": comment.comment,
            "created_at": comment.created_at,
            "updated_at": comment.updated_at,
            "username": username,
            "upvotes": upvotes or 0,
            "downvotes": downvotes or 0,
            "vote_status": vote_status,
        })
    return comments


def _collect_subtree_ids(comment):
    ids = [comment.id]
    for reply in comment.replies:
        ids.extend(_collect_subtree_ids(reply))
    return ids


def delete_comment(comment):
    delete_votes_for_targets("comment", _collect_subtree_ids(comment))
    db.session.delete(comment)
