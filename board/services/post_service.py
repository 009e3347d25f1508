import logging

from board.db import db
from board.errors import ForbiddenError, NotFoundError, UnauthorizedError, ValidationError
from board.repositories import post_repository, user_repository
from board.schemas.post_schema import PostSchema
from board.services.updates import PostUpdate


logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 300


def _clean_title(title):
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")
    title = title.strip()
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
    return title


def _get_owned_post(post_id: int, requester_id: int):
    post = post_repository.get_post(post_id)
    if not post:
        raise NotFoundError("Post not found")
    if post.user_id != requester_id:
        raise ForbiddenError("You can only modify your own posts")
    return post


def create_post(owner_id: int, title, text=None, url=None) -> int:
    title = _clean_title(title)

    if not user_repository.get_by_id(owner_id):
        raise UnauthorizedError("User not found")

    post = post_repository.create_post(
        user_id=owner_id,
        title=title,
        text=text,
        url=url,
    )
    db.session.commit()

    logger.info("User id=%s created post id=%s", owner_id, post.id)
    return post.id


def get_post(post_id: int, viewer_id=None):
    row = post_repository.get_post_with_stats(post_id, viewer_id)
    if row is None:
        raise NotFoundError("Post not found")
    return PostSchema().dump(row)


def list_posts(viewer_id=None):
    rows = post_repository.list_posts_with_stats(viewer_id)
    return PostSchema(many=True).dump(rows)


def update_post(post_id: int, requester_id: int, update: PostUpdate):
    post = _get_owned_post(post_id, requester_id)

    changes = update.changes()
    if "title" in changes:
        changes["title"] = _clean_title(changes["title"])

    if changes:
        post_repository.update_post(post, changes)
        db.session.commit()

    return get_post(post_id, viewer_id=requester_id)


def delete_post(post_id: int, requester_id: int):
    post = _get_owned_post(post_id, requester_id)

    post_repository.delete_post(post)
    db.session.commit()

    logger.info("User id=%s deleted post id=%s", requester_id, post_id)
