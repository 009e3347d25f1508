from flask import request
from marshmallow import ValidationError as SchemaValidationError

from board.errors import ValidationError


def load_json_body(schema):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON body")

    try:
        return schema.load(data)
    except SchemaValidationError as e:
        raise ValidationError("Invalid input", fields=e.messages) from e
