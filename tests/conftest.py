from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Sequence

import pytest

# Resolve the package from this checkout rather than a stale editable install.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from bookfold.imposition.core import PageSlot, SheetSide  # noqa: E402


def _is_from_root(module_name: str, root: Path) -> bool:
    module = sys.modules.get(module_name)
    module_file = getattr(module, "__file__", None)
    if module is None or module_file is None:
        return False

    try:
        module_path = Path(module_file).resolve()
    except OSError:
        return False
    return root in module_path.parents


def _ensure_module_from_root(module_name: str, root: Path) -> None:
    if _is_from_root(module_name, root):
        return

    # Drop bookfold modules loaded from another install so this checkout wins.
    for loaded_name in list(sys.modules):
        if loaded_name == module_name or loaded_name.startswith(f"{module_name}."):
            sys.modules.pop(loaded_name, None)

    module = importlib.import_module(module_name)
    module_file = getattr(module, "__file__", None)
    if not _is_from_root(module_name, root):
        raise RuntimeError(
            f"Expected '{module_name}' under '{root}', got '{module_file}'. "
            "Run `python -m pip install -e '.[dev]'` from this checkout and re-run pytest."
        )


def pytest_sessionstart(session) -> None:  # type: ignore[no-untyped-def]
    _ensure_module_from_root("bookfold", ROOT)
    _ensure_module_from_root("bookfold.imposition", ROOT)


def read_folded(sides: Sequence[SheetSide], signature: int) -> list[PageSlot]:
    """Print ``sides`` recto-verso, nest each signature's sheets, fold, and read."""
    per_signature = signature // 2
    reading: list[PageSlot] = []
    for start in range(0, len(sides), per_signature):
        block = sides[start : start + per_signature]
        sheets = [(block[index], block[index + 1]) for index in range(0, len(block), 2)]
        first_half: list[PageSlot] = []
        second_half: list[PageSlot] = []
        for recto, verso in sheets:
            first_half.extend([recto.back, verso.front])
        for recto, verso in reversed(sheets):
            second_half.extend([verso.back, recto.front])
        reading.extend(first_half + second_half)
    return reading


@pytest.fixture
def folded_reader():
    return read_folded
