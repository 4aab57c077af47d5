from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, TypeAlias

from bookfold.constants import PAGES_PER_SHEET
from bookfold.errors import InternalInvariantViolation, InvalidPageCount, InvalidSignature
from bookfold.logs import log_event

# 1-based logical page number, or None for a blank slot.
PageSlot: TypeAlias = int | None

_LOGGER = logging.getLogger("bookfold.imposition")


@dataclass(frozen=True)
class SheetSide:
    """Two logical pages sharing one double-wide side; ``front`` goes on the left half."""

    front: PageSlot
    back: PageSlot

    @property
    def pages(self) -> tuple[PageSlot, PageSlot]:
        return (self.front, self.back)


def round_up(value: int, multiple: int) -> int:
    return value + (-value % multiple)


def validate_page_count(page_count: int) -> None:
    if isinstance(page_count, bool) or not isinstance(page_count, int) or page_count <= 0:
        raise InvalidPageCount(f"page count must be a positive integer, got {page_count!r}")


def _signature_slots(page_count: int, signature: int, max_page: int) -> list[PageSlot]:
    # psbook ordering: even sides walk inward from both ends of each signature.
    slots: list[PageSlot] = []
    for current in range(max_page):
        position = current % signature
        actual = current - position
        if current % 4 in (0, 3):
            actual += signature - 1 - position // 2
        else:
            actual += position // 2
        slots.append(actual + 1 if actual < page_count else None)
    return slots


def apply_cover(slots: Sequence[PageSlot], page_count: int) -> list[PageSlot]:
    """Move the last page into the first blank slot and blank its old slot."""
    adjusted = list(slots)
    last_index = None
    for index, slot in enumerate(adjusted):
        if slot == page_count:
            last_index = index
    if last_index is None:
        raise InternalInvariantViolation(f"page {page_count} missing from the imposed sequence")

    first_blank = next((index for index, slot in enumerate(adjusted) if slot is None), None)
    if first_blank is None:
        log_event(_LOGGER, logging.WARNING, "sequence.cover.noop", page_count=page_count)
        return adjusted

    adjusted[first_blank] = adjusted[last_index]
    adjusted[last_index] = None
    return adjusted


def pair_sides(slots: Sequence[PageSlot]) -> tuple[SheetSide, ...]:
    if len(slots) % 2:
        raise InternalInvariantViolation(f"cannot pair an odd number of slots ({len(slots)})")
    return tuple(SheetSide(front=slots[index], back=slots[index + 1]) for index in range(0, len(slots), 2))


def build_sequence(
    page_count: int,
    signature: int | None,
    *,
    cover: bool = False,
) -> tuple[SheetSide, ...]:
    validate_page_count(page_count)

    if not signature:
        signature = max_page = round_up(page_count, PAGES_PER_SHEET)
    elif signature < 0 or signature % PAGES_PER_SHEET:
        raise InvalidSignature(f"signature must be a positive multiple of four, got {signature}")
    else:
        max_page = round_up(page_count, signature)

    slots = _signature_slots(page_count, signature, max_page)
    if cover:
        slots = apply_cover(slots, page_count)

    sides = pair_sides(slots)
    log_event(
        _LOGGER,
        logging.DEBUG,
        "sequence.built",
        page_count=page_count,
        signature=signature,
        max_page=max_page,
        cover=cover,
        sides=len(sides),
    )
    return sides
