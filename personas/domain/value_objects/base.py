"""Value object base capability."""

import dataclasses
import hashlib
import json
from typing import Any, Dict, TypeVar

T = TypeVar("T", bound="ValueObject")


class ValueObject:
    """Immutable value compared by a canonical snapshot of its fields.

    Concrete value objects are ``@dataclass(frozen=True, eq=False)`` so that
    equality and hashing come from here rather than from the generated
    dataclass methods. Validation runs from ``__post_init__``.
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ``ValidationError`` when an invariant does not hold."""

    def snapshot(self) -> Dict[str, Any]:
        """Canonical, serializable view of the fields that define the value."""
        if not dataclasses.is_dataclass(self):
            raise NotImplementedError(
                f"{type(self).__name__} must implement snapshot()"
            )
        return {
            f.name: _plain(getattr(self, f.name))
            for f in dataclasses.fields(self)
            if f.compare
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict."""
        return self.snapshot()

    def hash_code(self) -> int:
        """Deterministic hash of the snapshot, stable across processes."""
        payload = json.dumps(
            [type(self).__name__, _canonical_numbers(self.snapshot())],
            sort_keys=True,
            default=str,
            separators=(",", ":"),
        )
        digest = hashlib.blake2b(payload.encode("utf-8"), digest_size=8).digest()
        return int.from_bytes(digest, "big", signed=True)

    def copy_with(self: T, **overrides: Any) -> T:
        """Return a new instance with the given fields replaced.

        ``None`` overrides are ignored and the current value is kept.
        """
        init_fields = {f.name for f in dataclasses.fields(self) if f.init}
        unknown = set(overrides) - init_fields
        if unknown:
            raise TypeError(
                f"{type(self).__name__} has no field(s): {', '.join(sorted(unknown))}"
            )

        changes = {name: value for name, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)

    def __eq__(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return False
        return self.snapshot() == other.snapshot()

    def __hash__(self) -> int:
        return self.hash_code()


def _plain(value: Any) -> Any:
    """Convert nested values into JSON-friendly structures."""
    if isinstance(value, ValueObject):
        return value.snapshot()
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_plain(v) for v in value]
        if isinstance(value, (set, frozenset)):
            items.sort(key=repr)
        return items
    return value


def _canonical_numbers(value: Any) -> Any:
    """Collapse numbers that compare equal (``True == 1 == 1.0``) to one form."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {k: _canonical_numbers(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_canonical_numbers(v) for v in value]
    return value
