from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from board.routes.helpers import load_json_body
from board.schemas.comment_schema import CommentCreateSchema
from board.services import auth_service, comment_service


comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/post/<int:post_id>/comment", methods=["POST"])
@jwt_required()
def create_comment(post_id):
    data = load_json_body(CommentCreateSchema())
    comment_id = comment_service.add_comment(
        post_id=post_id,
        user_id=auth_service.current_user_id(),
        comment=data["comment"],
        parent_id=data["parent_id"],
    )
    return jsonify({
        "message": "Comment created",
        "id": comment_id
    }), 201


@comment_bp.route("/post/<int:post_id>/comment", methods=["GET"])
@jwt_required(optional=True)
def list_comments(post_id):
    comments = comment_service.list_comments(post_id, auth_service.current_user_id())
    return jsonify(comments), 200


@comment_bp.route("/post/<int:post_id>/comment/<int:comment_id>", methods=["DELETE"])
@jwt_required()
def delete_comment(post_id, comment_id):
    comment_service.delete_comment(post_id, comment_id, auth_service.current_user_id())
    return "", 204
