import sys
from pathlib import Path


def _add_repo_root_to_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_add_repo_root_to_path()

import pytest

from models import Dieline, Item


@pytest.fixture
def dieline() -> Dieline:
    # 53 mm pitch -> 18 labels per lane per 960 mm frame -> 75 labels/m across 4
    return Dieline(
        roll_width_mm=330,
        label_width_mm=70,
        label_height_mm=50,
        columns_across=4,
        rows_around=18,
        horizontal_gap_mm=3,
        vertical_gap_mm=3,
    )


@pytest.fixture
def two_items():
    return [Item(id="A", quantity=1000, name="Apple"), Item(id="B", quantity=500, name="Berry")]


@pytest.fixture
def mixed_items():
    return [
        Item(id="i1", quantity=1200, name="Lemon"),
        Item(id="i2", quantity=800, name="Lime"),
        Item(id="i3", quantity=800, name="Orange"),
        Item(id="i4", quantity=450, name="Grape"),
        Item(id="i5", quantity=30000, name="Mango"),
        Item(id="i6", quantity=25, name="Kiwi"),
    ]
