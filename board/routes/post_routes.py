from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from board.routes.helpers import load_json_body
from board.schemas.post_schema import PostCreateSchema, PostUpdateSchema
from board.services import auth_service, post_service
from board.services.updates import PostUpdate


post_bp = Blueprint("posts", __name__)


@post_bp.route("/post", methods=["POST"])
@jwt_required()
def create_post():
    data = load_json_body(PostCreateSchema())
    post_id = post_service.create_post(
        auth_service.current_user_id(),
        data["title"],
        data["text"],
        data["url"],
    )
    return jsonify({
        "message": "Post created successfully",
        "id": post_id
    }), 201


@post_bp.route("/post", methods=["GET"])
@jwt_required(optional=True)
def list_posts():
    return jsonify(post_service.list_posts(auth_service.current_user_id())), 200


@post_bp.route("/post/<int:post_id>", methods=["GET"])
@jwt_required(optional=True)
def get_post(post_id):
    return jsonify(post_service.get_post(post_id, auth_service.current_user_id())), 200


@post_bp.route("/post/<int:post_id>", methods=["PATCH"])
@jwt_required()
def update_post(post_id):
    data = load_json_body(PostUpdateSchema())
    post = post_service.update_post(
        post_id,
        auth_service.current_user_id(),
        PostUpdate.from_mapping(data),
    )
    return jsonify(post), 200


@post_bp.route("/post/<int:post_id>", methods=["DELETE"])
@jwt_required()
def delete_post(post_id):
    post_service.delete_post(post_id, auth_service.current_user_id())
    return "", 204
