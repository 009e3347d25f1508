from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from board.routes.helpers import load_json_body
from board.schemas.vote_schema import VoteSchema
from board.services import auth_service, vote_service


vote_bp = Blueprint("votes", __name__)


@vote_bp.route("/vote", methods=["POST"])
@jwt_required()
def vote_route():
    data = load_json_body(VoteSchema())

    counts = vote_service.vote(
        user_id=auth_service.current_user_id(),
        target_type=data["target_type"],
        target_id=data["target_id"],
        direction=data["direction"]
    )
    return jsonify(vote_service.serialize_counts(counts)), 200


@vote_bp.route("/vote/<target_type>/<int:target_id>", methods=["DELETE"])
@jwt_required()
def unvote_route(target_type, target_id):
    counts = vote_service.unvote(
        user_id=auth_service.current_user_id(),
        target_type=target_type,
        target_id=target_id,
    )
    return jsonify(vote_service.serialize_counts(counts)), 200
