from marshmallow import EXCLUDE, validate

from board.extensions.extensions import ma
from board.schemas.fields import Count, Id, VoteStatus


MAX_COMMENT_LENGTH = 10000


class CommentCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    comment = ma.Str(
        required=True,
        validate=validate.Length(min=1, max=MAX_COMMENT_LENGTH),
    )
    parent_id = Id(
        data_key="parentId",
        allow_none=True,
        load_default=None,
    )


class CommentResponseSchema(ma.Schema):
    id = ma.Int()
    post_id = ma.Int(data_key="postId")
    user_id = ma.Int(data_key="userId")
    parent_id = ma.Int(data_key="parentId", allow_none=True)
    comment = ma.Str()
    created_at = ma.DateTime()
    updated_at = ma.DateTime()
    username = ma.Str()
    upvotes = Count()
    downvotes = Count()
    vote_status = VoteStatus()
