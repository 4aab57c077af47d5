from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from bookfold.constants import PAGES_PER_SHEET
from bookfold.errors import InternalInvariantViolation, InvalidSignature
from bookfold.imposition.core import SheetSide, build_sequence
from bookfold.imposition.signature import SignatureRange, resolve_signature
from bookfold.logs import log_event

_LOGGER = logging.getLogger("bookfold.imposition")


@dataclass(frozen=True)
class PhysicalSheet:
    index: int
    recto: SheetSide
    verso: SheetSide


def group_sheets(sides: Sequence[SheetSide]) -> list[PhysicalSheet]:
    if len(sides) % 2:
        raise InternalInvariantViolation(f"cannot print {len(sides)} sides recto-verso")
    return [
        PhysicalSheet(index=index // 2, recto=sides[index], verso=sides[index + 1])
        for index in range(0, len(sides), 2)
    ]


def split_signatures(sides: Sequence[SheetSide], signature: int) -> list[tuple[SheetSide, ...]]:
    if signature <= 0 or signature % PAGES_PER_SHEET:
        raise InvalidSignature(f"signature must be a positive multiple of four, got {signature}")

    per_signature = signature // 2
    if len(sides) % per_signature:
        raise InternalInvariantViolation(
            f"{len(sides)} sides do not fill whole signatures of {signature} pages"
        )
    return [tuple(sides[index : index + per_signature]) for index in range(0, len(sides), per_signature)]


@dataclass(frozen=True)
class BookletPlan:
    page_count: int
    signature: int
    blank_pages: int
    cover: bool
    sides: tuple[SheetSide, ...]

    @property
    def slot_count(self) -> int:
        return len(self.sides) * 2

    @property
    def sheets(self) -> list[PhysicalSheet]:
        return group_sheets(self.sides)

    @property
    def signatures(self) -> list[tuple[SheetSide, ...]]:
        return split_signatures(self.sides, self.signature)

    @property
    def signature_count(self) -> int:
        return self.slot_count // self.signature


def plan_booklet(
    page_count: int,
    signature: str | int | SignatureRange | None = None,
    *,
    cover: bool = False,
) -> BookletPlan:
    resolved = resolve_signature(page_count, signature)
    sides = build_sequence(page_count, resolved.signature, cover=cover)
    plan = BookletPlan(
        page_count=page_count,
        signature=resolved.signature,
        blank_pages=resolved.blank_pages,
        cover=cover,
        sides=sides,
    )

    if plan.slot_count - page_count != plan.blank_pages:
        raise InternalInvariantViolation(
            f"sequence holds {plan.slot_count} slots for {page_count} pages "
            f"but {plan.blank_pages} blank pages were resolved"
        )

    log_event(
        _LOGGER,
        logging.INFO,
        "booklet.planned",
        page_count=page_count,
        signature=plan.signature,
        blank_pages=plan.blank_pages,
        signatures=plan.signature_count,
        sheets=len(plan.sides) // 2,
        cover=cover,
    )
    return plan
