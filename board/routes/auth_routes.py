from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from board.routes.helpers import load_json_body
from board.schemas.auth_schema import LoginSchema, RegisterSchema
from board.services import auth_service


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = load_json_body(RegisterSchema())
    token = auth_service.register(
        data["email"],
        data["username"],
        data["password"],
    )
    return jsonify({"token": token}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = load_json_body(LoginSchema())
    token = auth_service.login(data["username"], data["password"])
    return jsonify({"token": token}), 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify(auth_service.current_identity()), 200
