import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash

from board.db import db
from board.errors import ConflictError, NotFoundError, ValidationError
from board.repositories import user_repository
from board.schemas.auth_schema import UserSchema
from board.services.auth_service import issue_token
from board.services.updates import UserUpdate


logger = logging.getLogger(__name__)


def get_profile(user_id: int):
    user = user_repository.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserSchema().dump(user)


def update_profile(user_id: int, update: UserUpdate):
    user = user_repository.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")

    changes = update.changes()
    for field, value in changes.items():
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{field.capitalize()} must be a non-empty string")

    email = changes.get("email", user.email).strip()
    username = changes.get("username", user.username).strip()
    if ("email" in changes or "username" in changes) and \
            user_repository.exists_with_email_or_username(email, username, exclude_id=user.id):
        raise ConflictError("Email or username already exists")

    user.email = email
    user.username = username
    if "password" in changes:
        user.password_hash = generate_password_hash(changes["password"])

    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise ConflictError("Email or username already exists") from e

    logger.info("Updated profile for user id=%s (%s)", user.id, ", ".join(sorted(changes)))
    return issue_token(user)
