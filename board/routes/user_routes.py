from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from board.routes.helpers import load_json_body
from board.schemas.auth_schema import UserUpdateSchema
from board.services import auth_service, user_service
from board.services.updates import UserUpdate


user_bp = Blueprint("users", __name__)


@user_bp.route("/user/me", methods=["GET"])
@jwt_required()
def get_me():
    return jsonify(user_service.get_profile(auth_service.current_user_id())), 200


@user_bp.route("/user/me", methods=["PATCH"])
@jwt_required()
def update_me():
    data = load_json_body(UserUpdateSchema())
    token = user_service.update_profile(
        auth_service.current_user_id(),
        UserUpdate.from_mapping(data),
    )
    return jsonify({"token": token}), 200
