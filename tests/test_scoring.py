import math

from models import DEFAULT_PRESS, DEFAULT_WEIGHTS, Item, ProposedRun, SlotAssignment
from reasoning import explain
from scoring import EfficiencyScores, score_runs, theoretical_min_meters, to_percent


def _run(number, meters, frames, *qtys):
    return ProposedRun(
        run_number=number,
        slot_assignments=tuple(SlotAssignment(s, f"i{s}", q) for s, q in enumerate(qtys)),
        meters=meters,
        frames=frames,
    )


def test_to_percent_rounds_half_up():
    assert to_percent(0.625) == 63
    assert to_percent(0.62498) == 62
    assert to_percent(1.0) == 100
    assert to_percent(0.0) == 0


def test_theoretical_min_meters(dieline):
    items = [Item("a", 1500, "A")]
    assert math.isclose(theoretical_min_meters(items, dieline, DEFAULT_PRESS), 20.0)


def test_score_components(dieline):
    items = [Item("a", 750, "A"), Item("b", 750, "B")]
    runs = [_run(1, 40.0, 42, 750, 750)]
    scores = score_runs(runs, items, dieline, DEFAULT_WEIGHTS, DEFAULT_PRESS)
    assert math.isclose(scores.material, 0.5)
    assert math.isclose(scores.printing, 1.0)
    assert math.isclose(scores.labor, 0.5)
    assert math.isclose(scores.overall, 0.5 * 0.4 + 0.35 + 0.5 * 0.25)
    assert (scores.material_pct, scores.print_pct, scores.labor_pct, scores.overall_pct) == (50, 100, 50, 68)


def test_material_efficiency_is_capped_at_one(dieline):
    items = [Item("a", 1500, "A")]
    scores = score_runs([_run(1, 10.0, 11, 1500)], items, dieline, DEFAULT_WEIGHTS, DEFAULT_PRESS)
    assert scores.material == 1.0


def test_no_runs_score_zero(dieline):
    scores = score_runs([], [Item("a", 1, "A")], dieline, DEFAULT_WEIGHTS, DEFAULT_PRESS)
    assert scores.overall == 0.0


def test_reasoning_phrases():
    items = [Item("a", 1234, "A")]
    runs = [_run(1, 1.0, 2, 600), _run(2, 1.5, 2, 634)]

    good = EfficiencyScores(material=0.8, printing=0.5, labor=0.9, overall=0.7)
    assert explain(runs, items, good) == (
        "2 runs printing 1,234 labels. 2.5m of substrate (4 frames). "
        "Good material efficiency. Well-balanced slot usage."
    )

    poor = EfficiencyScores(material=0.5, printing=0.5, labor=0.5, overall=0.5)
    assert explain(runs, items, poor) == (
        "2 runs printing 1,234 labels. 2.5m of substrate (4 frames). "
        "Some material waste expected."
    )
