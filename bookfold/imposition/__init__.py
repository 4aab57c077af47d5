from bookfold.imposition.core import (
    PageSlot,
    SheetSide,
    apply_cover,
    build_sequence,
    pair_sides,
    round_up,
)
from bookfold.imposition.plan import (
    BookletPlan,
    PhysicalSheet,
    group_sheets,
    plan_booklet,
    split_signatures,
)
from bookfold.imposition.signature import (
    ResolvedSignature,
    SignatureRange,
    SignatureSpec,
    find_signature,
    parse_signature_spec,
    range_bounds,
    resolve_signature,
)

__all__ = [
    "BookletPlan",
    "PageSlot",
    "PhysicalSheet",
    "ResolvedSignature",
    "SheetSide",
    "SignatureRange",
    "SignatureSpec",
    "apply_cover",
    "build_sequence",
    "find_signature",
    "group_sheets",
    "pair_sides",
    "parse_signature_spec",
    "plan_booklet",
    "range_bounds",
    "resolve_signature",
    "round_up",
    "split_signatures",
]
