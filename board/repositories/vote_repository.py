from sqlalchemy import case, func, null, select

from board.db import db
from board.models.vote_model import Vote


def get_vote(user_id, target_type, target_id):
    return Vote.query.filter_by(
        user_id=user_id,
        target_type=target_type,
        target_id=target_id
    ).first()


def upsert_vote(user_id, target_type, target_id, direction) -> bool:
    vote = get_vote(user_id, target_type, target_id)

    if vote:
        if vote.direction == direction:
            return False
        vote.direction = direction
    else:
        vote = Vote(
            user_id=user_id,
            target_type=target_type,
            target_id=target_id,
            direction=direction
        )
        db.session.add(vote)

    return True


def delete_vote(user_id, target_type, target_id) -> bool:
    vote = get_vote(user_id, target_type, target_id)
    if not vote:
        return False

    db.session.delete(vote)
    return True


def delete_votes_for_targets(target_type: str, target_ids) -> int:
    target_ids = list(target_ids)
    if not target_ids:
        return 0

    return (
        Vote.query
        .filter(Vote.target_type == target_type, Vote.target_id.in_(target_ids))
        .delete(synchronize_session=False)
    )


def count_votes(target_type: str, target_id: int):
    upvotes, downvotes = (
        db.session.query(
            func.coalesce(func.sum(case((Vote.direction == "up", 1), else_=0)), 0),
            func.coalesce(func.sum(case((Vote.direction == "down", 1), else_=0)), 0),
        )
        .filter(
            Vote.target_type == target_type,
            Vote.target_id == target_id
        )
        .one()
    )
    return {"upvotes": int(upvotes), "downvotes": int(downvotes)}


def vote_columns(target_type: str, target_id_column, viewer_id=None):
    """Correlated subqueries for upvotes, downvotes and the viewer's own vote."""
    def _count(direction):
        return (
            select(func.count(Vote.id))
            .where(
                Vote.target_type == target_type,
                Vote.target_id == target_id_column,
                Vote.direction == direction,
            )
            .scalar_subquery()
        )

    if viewer_id is None:
        vote_status = null()
    else:
        vote_status = (
            select(Vote.direction)
            .where(
                Vote.target_type == target_type,
                Vote.target_id == target_id_column,
                Vote.user_id == viewer_id,
            )
            .scalar_subquery()
        )

    return (
        _count("up").label("upvotes"),
        _count("down").label("downvotes"),
        vote_status.label("vote_status"),
    )
