from dataclasses import dataclass
from typing import Any, Dict

from storage import decode_json, encode_json

# attribute name -> (store key, default)
FIELDS: Dict[str, tuple] = {
    "parent_name": ("parentName", ""),
    "child_name": ("childName", ""),
    "gender": ("gender", "Male"),
    "age": ("age", 3),
}


@dataclass
class PersonalInfo:
    parent_name: str = ""
    child_name: str = ""
    gender: str = "Male"
    age: int = 3


def _same_type(value: Any, default: Any) -> bool:
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(value, bool) and isinstance(default, bool)
    return isinstance(value, type(default))


class PersonalInfoRepository:
    """
    Parent/child details, each field stored under its own key.
    No validation here; the form constrains gender and age before saving.
    """

    def __init__(self, store):
        self.store = store

    def get_field(self, name: str) -> Any:
        key, default = FIELDS[name]
        value = decode_json(self.store.read_value(key), default, key)
        if not _same_type(value, default):
            return default
        return value

    def set_field(self, name: str, value: Any) -> bool:
        key, _ = FIELDS[name]
        return self.store.write_value(key, encode_json(value))

    def load(self) -> PersonalInfo:
        return PersonalInfo(**{name: self.get_field(name) for name in FIELDS})

    def save(self, info: PersonalInfo) -> bool:
        """Write every field; False if any of them failed."""
        results = [self.set_field(name, getattr(info, name)) for name in FIELDS]
        return all(results)
