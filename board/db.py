from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

# Largest value a signed 64-bit integer primary key can hold.
MAX_ID = 2 ** 63 - 1


def in_id_range(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_ID
