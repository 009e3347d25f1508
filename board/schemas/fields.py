from marshmallow import fields


class Count(fields.Field):
    """Aggregate count rendered as a decimal string, e.g. ``"0"``."""

    def _serialize(self, value, attr, obj, **kwargs):
        return str(int(value or 0))


class VoteStatus(fields.Field):
    """The viewer's own vote: ``True`` for up, ``False`` for down, ``None`` if none."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value == "up"


class Id(fields.Integer):
    """Integer id from JSON; booleans are rejected even though ``bool`` is an ``int``."""

    def __init__(self, **kwargs):
        super().__init__(strict=True, **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)
