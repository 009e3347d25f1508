"""Optional-field records for patch updates.

A field left as ``UNSET`` was not supplied and must not be written. ``None``
is a real value (e.g. clearing a post's ``url``).
"""
from dataclasses import dataclass, fields


class _Unset:
    def __repr__(self):
        return "UNSET"


UNSET = _Unset()


class _PatchRecord:
    @classmethod
    def from_mapping(cls, data: dict):
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def changes(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass(frozen=True)
class PostUpdate(_PatchRecord):
    title: object = UNSET
    text: object = UNSET
    url: object = UNSET


@dataclass(frozen=True)
class UserUpdate(_PatchRecord):
    email: object = UNSET
    username: object = UNSET
    password: object = UNSET
