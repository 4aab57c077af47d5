from __future__ import annotations

import re
from typing import Final

PAGES_PER_SHEET: Final[int] = 4
DEFAULT_MIN_SIGNATURE: Final[int] = 4

# Signatures thicker than this cannot be folded by hand.
MAX_FOLDABLE_SIGNATURE: Final[int] = 100

EXACT_SIGNATURE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9]+$")
RANGE_SIGNATURE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([0-9]+)?-([0-9]+)?$")
