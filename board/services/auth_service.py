import logging

from flask_jwt_extended import create_access_token, decode_token, get_jwt, get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import ExpiredSignatureError, PyJWTError
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from board.db import db
from board.errors import ConflictError, UnauthorizedError, ValidationError
from board.repositories import user_repository


logger = logging.getLogger(__name__)


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def issue_token(user) -> str:
    return create_access_token(
        identity=str(user.id),
        additional_claims=user.to_claims(),
    )


def _identity_from_claims(claims):
    return {
        "id": int(claims["sub"]),
        "username": claims["username"],
        "email": claims["email"],
    }


def register(email, username, password):
    if (
        not _require_non_empty_string(email)
        or not _require_non_empty_string(username)
        or not _require_non_empty_string(password)
    ):
        raise ValidationError("Missing fields")

    email = email.strip()
    username = username.strip()

    if user_repository.exists_with_email_or_username(email, username):
        raise ConflictError("Email or username already exists")

    try:
        user = user_repository.create_user(
            email=email,
            username=username,
            password_hash=generate_password_hash(password),
        )
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise ConflictError("Email or username already exists") from e

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return issue_token(user)


def login(username, password):
    if not _require_non_empty_string(username) or not _require_non_empty_string(password):
        raise UnauthorizedError("Invalid credentials")

    username = username.strip()

    user = user_repository.get_by_username(username)
    if not user or not check_password_hash(user.password_hash, password):
        logger.warning("Failed login for username %s", username)
        raise UnauthorizedError("Invalid credentials")

    return issue_token(user)


def verify(token):
    if not _require_non_empty_string(token):
        raise UnauthorizedError("Missing authorization token")

    try:
        claims = decode_token(token)
    except ExpiredSignatureError as e:
        raise UnauthorizedError("Token has expired") from e
    except (JWTExtendedException, PyJWTError) as e:
        raise UnauthorizedError("Invalid token") from e

    if claims.get("type") != "access":
        raise UnauthorizedError("Invalid token")

    try:
        return _identity_from_claims(claims)
    except (KeyError, TypeError, ValueError) as e:
        raise UnauthorizedError("Invalid token") from e


def current_identity():
    """Identity of the token already verified by ``@jwt_required`` for this request."""
    return _identity_from_claims(get_jwt())


def current_user_id():
    identity = get_jwt_identity()
    if identity is None:
        return None
    return int(identity)
