from marshmallow import EXCLUDE, pre_load, validate

from board.extensions.extensions import ma


USERNAME_LENGTH = validate.Length(
    min=5, max=20, error="Username must be between 5 and 20 characters"
)
PASSWORD_LENGTH = validate.Length(
    min=12, error="Password must be at least 12 characters"
)


def _strip_strings(data, keys):
    cleaned = dict(data)
    for key in keys:
        if isinstance(cleaned.get(key), str):
            cleaned[key] = cleaned[key].strip()
    return cleaned


class RegisterSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = ma.Email(required=True)
    username = ma.Str(required=True, validate=USERNAME_LENGTH)
    password = ma.Str(required=True, validate=PASSWORD_LENGTH)

    @pre_load
    def strip_identity(self, data, **kwargs):
        return _strip_strings(data, ("email", "username"))


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    # missing or blank credentials are rejected by the login itself as 401
    username = ma.Str(allow_none=True, load_default=None)
    password = ma.Str(allow_none=True, load_default=None)

    @pre_load
    def strip_username(self, data, **kwargs):
        return _strip_strings(data, ("username",))


class UserUpdateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = ma.Email()
    username = ma.Str(validate=USERNAME_LENGTH)
    password = ma.Str(validate=PASSWORD_LENGTH)

    @pre_load
    def strip_identity(self, data, **kwargs):
        return _strip_strings(data, ("email", "username"))


class UserSchema(ma.Schema):
    id = ma.Int()
    username = ma.Str()
    email = ma.Str()
    created_at = ma.DateTime()
    updated_at = ma.DateTime()
