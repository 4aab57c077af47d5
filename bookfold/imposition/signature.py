from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from bookfold.constants import (
    DEFAULT_MIN_SIGNATURE,
    EXACT_SIGNATURE_PATTERN,
    MAX_FOLDABLE_SIGNATURE,
    PAGES_PER_SHEET,
    RANGE_SIGNATURE_PATTERN,
)
from bookfold.errors import (
    InternalInvariantViolation,
    InvalidRange,
    InvalidSignature,
    UnrecognizedSignatureFormat,
)
from bookfold.imposition.core import round_up, validate_page_count
from bookfold.logs import log_event

_LOGGER = logging.getLogger("bookfold.imposition")


@dataclass(frozen=True)
class SignatureRange:
    minimum: int | None = None
    maximum: int | None = None

    def __str__(self) -> str:
        low = "" if self.minimum is None else str(self.minimum)
        high = "" if self.maximum is None else str(self.maximum)
        return f"{low}-{high}"


SignatureSpec: TypeAlias = int | SignatureRange | None


@dataclass(frozen=True)
class ResolvedSignature:
    signature: int
    blank_pages: int


def parse_signature_spec(raw: str | int | SignatureRange | None) -> SignatureSpec:
    """Turn user input such as ``"16"``, ``"20-60"`` or ``"-40"`` into a spec.

    Empty input and zero both mean "no signature": the whole document is
    imposed as a single signature.
    """
    if raw is None or isinstance(raw, SignatureRange):
        return raw
    if isinstance(raw, bool):
        raise UnrecognizedSignatureFormat(f"unrecognized signature {raw!r}")
    if isinstance(raw, int):
        return _checked_exact(raw) if raw else None
    if not isinstance(raw, str):
        raise UnrecognizedSignatureFormat(f"unrecognized signature {raw!r}")

    text = raw.strip()
    if not text:
        return None
    if EXACT_SIGNATURE_PATTERN.match(text):
        value = int(text)
        return _checked_exact(value) if value else None

    match = RANGE_SIGNATURE_PATTERN.match(text)
    if match is None:
        raise UnrecognizedSignatureFormat(f"unrecognized signature range '{raw}'")

    low, high = match.groups()
    return SignatureRange(
        minimum=int(low) if low else None,
        maximum=int(high) if high else None,
    )


def _checked_exact(value: int) -> int:
    if value <= 0 or value % PAGES_PER_SHEET:
        raise InvalidSignature(f"signature must be a positive multiple of four, got {value}")
    return value


def range_bounds(spec: SignatureRange, page_count: int) -> tuple[int, int]:
    for bound in (spec.minimum, spec.maximum):
        if bound is not None and bound < 0:
            raise InvalidRange(f"signature range bounds must be >= 0, got '{spec}'")

    minimum = round_up(spec.minimum or DEFAULT_MIN_SIGNATURE, PAGES_PER_SHEET)
    maximum = round_up(spec.maximum or page_count, PAGES_PER_SHEET)
    if maximum <= minimum:
        raise InvalidRange(f"bad signature range {minimum}-{maximum}: maximum must exceed minimum")
    return minimum, maximum


def find_signature(num: int, maximum: int) -> int:
    """Largest multiple of four not above ``maximum`` that divides ``num``."""
    if num <= 0 or num % PAGES_PER_SHEET:
        raise InternalInvariantViolation(f"page total {num} is not a positive multiple of four")
    if maximum % PAGES_PER_SHEET:
        raise InternalInvariantViolation(f"signature bound {maximum} is not a multiple of four")

    candidate = maximum
    while candidate > 0:
        if num % candidate == 0:
            return candidate
        candidate -= PAGES_PER_SHEET

    raise InternalInvariantViolation(f"no signature up to {maximum} divides {num} pages")


def _optimize_range(page_count: int, spec: SignatureRange) -> ResolvedSignature:
    minimum, maximum = range_bounds(spec, page_count)
    rounded_pages = round_up(page_count, PAGES_PER_SHEET)
    needed = rounded_pages - page_count

    if rounded_pages <= minimum:
        return ResolvedSignature(signature=rounded_pages, blank_pages=needed)

    signature = find_signature(rounded_pages, maximum)
    if rounded_pages > maximum:
        # Trade extra blank pages for a signature inside the range.
        while signature < minimum:
            rounded_pages += PAGES_PER_SHEET
            needed += PAGES_PER_SHEET
            signature = find_signature(rounded_pages, maximum)

    return ResolvedSignature(signature=signature, blank_pages=needed)


def resolve_signature(
    page_count: int,
    spec: str | int | SignatureRange | None,
) -> ResolvedSignature:
    validate_page_count(page_count)
    parsed = parse_signature_spec(spec)

    if parsed is None:
        signature = round_up(page_count, PAGES_PER_SHEET)
        resolved = ResolvedSignature(signature=signature, blank_pages=signature - page_count)
    elif isinstance(parsed, SignatureRange):
        resolved = _optimize_range(page_count, parsed)
    else:
        resolved = ResolvedSignature(
            signature=parsed,
            blank_pages=round_up(page_count, parsed) - page_count,
        )

    log_event(
        _LOGGER,
        logging.DEBUG,
        "signature.resolved",
        page_count=page_count,
        spec=None if parsed is None else str(parsed),
        signature=resolved.signature,
        blank_pages=resolved.blank_pages,
    )
    if resolved.signature > MAX_FOLDABLE_SIGNATURE:
        log_event(
            _LOGGER,
            logging.WARNING,
            "signature.too_thick",
            signature=resolved.signature,
            limit=MAX_FOLDABLE_SIGNATURE,
        )
    return resolved
