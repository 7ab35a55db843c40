from dataclasses import replace

from models import Item, LayoutOption, PressConfig, ProposedRun, SlotAssignment
from timing import estimate_production_time
from validation import validate_layout


def _option(runs, total_frames):
    return LayoutOption(
        id="layout-test-0",
        runs=tuple(runs),
        total_meters=0.0,
        total_frames=total_frames,
        total_waste_meters=0.0,
        material_efficiency_score=0,
        print_efficiency_score=0,
        labor_efficiency_score=0,
        overall_score=0,
        reasoning="",
    )


def _run(number, *assignments):
    return ProposedRun(
        run_number=number,
        slot_assignments=tuple(SlotAssignment(s, item_id, q) for s, (item_id, q) in enumerate(assignments)),
        meters=1.0,
        frames=2,
    )


ITEMS = [Item("a", 100, "Apple"), Item("b", 50, "Berry"), Item("c", 10, "Cherry")]


def test_exact_coverage_is_valid():
    option = _option([_run(1, ("a", 60), ("b", 50)), _run(2, ("a", 40), ("c", 10))], 4)
    result = validate_layout(option, ITEMS)
    assert result.valid
    assert result.errors == ()


def test_missing_and_over_assigned_are_reported():
    option = _option([_run(1, ("a", 90), ("b", 55))], 2)
    result = validate_layout(option, ITEMS)
    assert not result.valid
    assert result.errors == (
        "Apple: Missing 10 labels",
        "Berry: Over-assigned by 5 labels",
        "Cherry: Missing 10 labels",
    )


def test_validation_does_not_touch_the_option():
    option = _option([_run(1, ("a", 1))], 2)
    before = replace(option)
    validate_layout(option, ITEMS)
    assert option == before


def test_time_estimate_three_runs_ten_frames():
    option = _option([_run(1), _run(2), _run(3)], 10)
    # 15 + 2 * 2 + 10 * 0.5
    assert estimate_production_time(option) == 24


def test_time_estimate_rounds_up():
    option = _option([_run(1)], 3)
    # 15 + 0 + 1.5
    assert estimate_production_time(option) == 17


def test_time_estimate_uses_press_constants():
    press = PressConfig(setup_minutes=30, changeover_minutes=5, per_frame_minutes=0.25)
    option = _option([_run(1), _run(2)], 8)
    assert estimate_production_time(option, press) == 37
