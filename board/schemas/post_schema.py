from marshmallow import EXCLUDE, pre_load, validate

from board.extensions.extensions import ma
from board.schemas.fields import Count, VoteStatus


TITLE_LENGTH = validate.Length(min=1, max=300)
URL_SCHEMES = {"http", "https"}


def _clean_post_fields(data):
    cleaned = dict(data)
    if isinstance(cleaned.get("title"), str):
        cleaned["title"] = cleaned["title"].strip()
    for key in ("text", "url"):
        value = cleaned.get(key)
        if isinstance(value, str) and not value.strip():
            cleaned[key] = None
    return cleaned


class PostCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    title = ma.Str(required=True, validate=TITLE_LENGTH)
    text = ma.Str(allow_none=True, load_default=None)
    url = ma.Url(allow_none=True, load_default=None, schemes=URL_SCHEMES)

    @pre_load
    def clean(self, data, **kwargs):
        return _clean_post_fields(data)


class PostUpdateSchema(ma.Schema):
    """Absent keys stay absent so the update only touches what was sent."""

    class Meta:
        unknown = EXCLUDE

    title = ma.Str(validate=TITLE_LENGTH)
    text = ma.Str(allow_none=True)
    url = ma.Url(allow_none=True, schemes=URL_SCHEMES)

    @pre_load
    def clean(self, data, **kwargs):
        return _clean_post_fields(data)


class PostSchema(ma.Schema):
    id = ma.Int()
    user_id = ma.Int()
    title = ma.Str()
    text = ma.Str(allow_none=True)
    url = ma.Str(allow_none=True)
    created_at = ma.DateTime()
    updated_at = ma.DateTime()
    username = ma.Str()
    comment_count = Count()
    upvotes = Count()
    downvotes = Count()
    vote_status = VoteStatus()
