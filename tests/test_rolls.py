import pytest

from models import PressConfig
from rolls import format_roll_label, plan_roll_splits


def test_fits_on_one_roll():
    assert plan_roll_splits(400, 500) == []
    assert plan_roll_splits(500, 500) == []


def test_tiny_remainder_merged_and_even_offered():
    options = plan_roll_splits(1008, 500)
    assert [o.strategy for o in options] == ["fill_first", "even"]
    assert [r.label_count for r in options[0].rolls] == [500, 508]
    assert options[0].label == "Fill first: 500 + 508"
    assert [r.label_count for r in options[1].rolls] == [504, 504]
    assert [r.roll_number for r in options[1].rolls] == [1, 2]


def test_even_skipped_when_identical():
    options = plan_roll_splits(1000, 500)
    assert [o.strategy for o in options] == ["fill_first"]


def test_remainder_above_tolerance_kept():
    options = plan_roll_splits(1100, 500)
    assert [r.label_count for r in options[0].rolls] == [500, 500, 100]
    assert [r.label_count for r in options[1].rolls] == [367, 367, 366]


def test_tolerance_comes_from_press():
    options = plan_roll_splits(1100, 500, PressConfig(roll_tolerance=100))
    assert [r.label_count for r in options[0].rolls] == [500, 600]


def test_grouped_label_for_many_rolls():
    options = plan_roll_splits(4005, 500)
    assert options[0].label == "Fill first: 7 x 500 + 505"
    assert options[1].label == "Even split: 5 x 501 + 3 x 500"


def test_format_roll_label():
    assert format_roll_label([500, 500, 8]) == "500 + 500 + 8"
    assert format_roll_label([1000] * 8 + [5]) == "8 x 1,000 + 5"


def test_non_positive_roll_size_rejected():
    with pytest.raises(ValueError):
        plan_roll_splits(100, 0)


def test_two_rolls_merge_into_one():
    options = plan_roll_splits(520, 500)
    assert [r.label_count for r in options[0].rolls] == [520]
    assert options[0].label == "Fill first: 520"
    assert [o.strategy for o in options] == ["fill_first"]


def test_tiny_remainder_merged_into_last_full_roll():
    options = plan_roll_splits(1508, 500)
    assert [r.label_count for r in options[0].rolls] == [500, 500, 508]
