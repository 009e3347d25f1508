from sqlalchemy import or_

from board.db import db
from board.models.user_model import User


def get_by_id(user_id: int):
    return db.session.get(User, user_id)


def get_by_username(username: str):
    return User.query.filter_by(username=username).first()


def exists_with_email_or_username(email: str, username: str, exclude_id=None) -> bool:
    query = User.query.filter(
        or_(User.email == email, User.username == username)
    )
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return db.session.query(query.exists()).scalar()


def create_user(email, username, password_hash):
    user = User(
        email=email,
        username=username,
        password_hash=password_hash,
    )
    db.session.add(user)
    db.session.flush()
    return user
