from dataclasses import fields
from typing import Any, Dict


class ToDictMixin:
    """
    Mixin giving catalog dataclasses a JSON-ready to_dict().

    Nested models, lists and count dictionaries are converted recursively.
    """

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}


def _plain(value: Any) -> Any:
    if isinstance(value, ToDictMixin):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value
