from board.db import db
from board.errors import ForbiddenError, NotFoundError, ValidationError
from board.repositories import post_repository
from board.repositories.comment_repository import (
    create_comment,
    delete_comment as delete_comment_row,
    get_comment,
    get_comments_by_post,
)
from board.schemas.comment_schema import MAX_COMMENT_LENGTH, CommentResponseSchema


def add_comment(post_id, user_id, comment, parent_id=None):
    if not isinstance(comment, str) or not comment.strip():
        raise ValidationError("Comment text is required")

    comment = comment.strip()
    if len(comment) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
        )

    row = create_comment(
        user_id=user_id,
        post_id=post_id,
        comment=comment,
        parent_id=parent_id
    )

    db.session.commit()
    return row.id


def list_comments(post_id, viewer_id=None):
    if not post_repository.get_post(post_id):
        raise NotFoundError("Post not found")

    comments = get_comments_by_post(post_id, viewer_id)
    return CommentResponseSchema(many=True).dump(comments)


def delete_comment(post_id, comment_id, requester_id):
    comment = get_comment(comment_id)
    if not comment or comment.post_id != post_id:
        raise NotFoundError("Comment not found")
    if comment.user_id != requester_id:
        raise ForbiddenError("You can only delete your own comments")

    delete_comment_row(comment)
    db.session.commit()
