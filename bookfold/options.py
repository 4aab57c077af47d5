from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from bookfold.errors import InvalidOptions
from bookfold.imposition.plan import BookletPlan, plan_booklet
from bookfold.imposition.signature import SignatureSpec, parse_signature_spec

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}
_KNOWN_KEYS = {"signature", "cover"}


@dataclass(frozen=True)
class ImpositionOptions:
    signature: SignatureSpec = None
    cover: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> ImpositionOptions:
        """Build options from raw form, manifest or argv values."""
        unknown = sorted(set(values) - _KNOWN_KEYS)
        if unknown:
            raise InvalidOptions(f"unknown imposition options: {', '.join(unknown)}")

        return cls(
            signature=parse_signature_spec(values.get("signature")),
            cover=_parse_flag(values.get("cover", False)),
        )

    def plan(self, page_count: int) -> BookletPlan:
        return plan_booklet(page_count, self.signature, cover=self.cover)


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False

    raise InvalidOptions(f"cover must be a boolean flag, got {value!r}")
