from marshmallow import EXCLUDE, validate

from board.extensions.extensions import ma
from board.models.vote_model import DIRECTIONS, TARGET_TYPES
from board.schemas.fields import Count, Id


class VoteSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    target_type = ma.Str(
        data_key="targetType",
        required=True,
        validate=validate.OneOf(TARGET_TYPES),
    )
    target_id = Id(data_key="targetId", required=True)
    direction = ma.Str(required=True, validate=validate.OneOf(DIRECTIONS))


class VoteCountsSchema(ma.Schema):
    upvotes = Count()
    downvotes = Count()
