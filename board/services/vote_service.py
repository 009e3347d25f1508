from sqlalchemy.exc import IntegrityError

from board.db import db
from board.errors import NotFoundError, ValidationError
from board.models.vote_model import DIRECTIONS, TARGET_TYPES
from board.repositories import comment_repository, post_repository
from board.repositories.vote_repository import count_votes, delete_vote, upsert_vote
from board.schemas.vote_schema import VoteCountsSchema


def _ensure_target_exists(target_type: str, target_id: int):
    if target_type not in TARGET_TYPES:
        raise ValidationError("Invalid target type")

    if target_type == "post":
        target = post_repository.get_post(target_id)
    else:
        target = comment_repository.get_comment(target_id)

    if not target:
        raise NotFoundError(f"{target_type.capitalize()} not found")


def get_counts(target_type: str, target_id: int):
    return count_votes(target_type, target_id)


def _upsert_and_commit(user_id, target_type, target_id, direction):
    changed = upsert_vote(
        user_id=user_id,
        target_type=target_type,
        target_id=target_id,
        direction=direction
    )
    if changed:
        db.session.commit()


def vote(user_id: int, target_type: str, target_id: int, direction: str):
    if direction not in DIRECTIONS:
        raise ValidationError("Invalid vote direction")

    _ensure_target_exists(target_type, target_id)

    try:
        _upsert_and_commit(user_id, target_type, target_id, direction)
    except IntegrityError:
        # another request inserted this user's vote first; update that row
        db.session.rollback()
        _upsert_and_commit(user_id, target_type, target_id, direction)

    return get_counts(target_type, target_id)


def unvote(user_id: int, target_type: str, target_id: int):
    _ensure_target_exists(target_type, target_id)

    if delete_vote(user_id, target_type, target_id):
        db.session.commit()

    return get_counts(target_type, target_id)


def serialize_counts(counts):
    return VoteCountsSchema().dump(counts)
