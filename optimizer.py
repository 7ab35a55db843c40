# optimizer.py - labelgang ver1.0
#
# Entry point for callers: runs every strategy, scores each candidate,
# attaches reasoning and returns the options best-first.

import re
from typing import List, Optional

from models import (
    DEFAULT_PRESS, DEFAULT_WEIGHTS, Dieline, Item, LayoutOption,
    OptimizationWeights, PressConfig
)
from geometry import validate_dieline
from strategies import STRATEGIES
from scoring import score_runs, theoretical_min_meters, total_frames, total_meters
from reasoning import explain
from validation import validate_items, validate_press, validate_weights


def option_id(strategy_name: str, index: int) -> str:
    slug = re.sub(r"\s+", "-", strategy_name.strip().lower())
    return f"layout-{slug}-{index}"


def generate_layout_options(
    items: List[Item],
    dieline: Dieline,
    weights: Optional[OptimizationWeights] = None,
    press: Optional[PressConfig] = None
) -> List[LayoutOption]:
    """
    Returns one LayoutOption per strategy sorted by overall_score
    descending. Ties keep generation order (Balanced, Minimal Waste,
    Simple). An empty item list gives an empty result.

    Raises ValueError for malformed geometry, bad quantities, duplicate
    item ids, negative weights or unusable press constants.
    """
    weights = weights or DEFAULT_WEIGHTS
    press = press or DEFAULT_PRESS

    if not items:
        return []

    validate_dieline(dieline, press)
    validate_items(items)
    validate_weights(weights)
    validate_press(press)

    items = list(items)
    theoretical = theoretical_min_meters(items, dieline, press)

    options: List[LayoutOption] = []
    for index, (name, strategy) in enumerate(STRATEGIES):
        runs = strategy(items, dieline, press)
        scores = score_runs(runs, items, dieline, weights, press)
        meters = total_meters(runs)

        options.append(LayoutOption(
            id=option_id(name, index),
            runs=tuple(runs),
            total_meters=round(meters, 2),
            total_frames=total_frames(runs),
            total_waste_meters=round(meters - theoretical, 2),
            material_efficiency_score=scores.material_pct,
            print_efficiency_score=scores.print_pct,
            labor_efficiency_score=scores.labor_pct,
            overall_score=scores.overall_pct,
            reasoning=explain(runs, items, scores)
        ))

    # sorted() is stable, so equal scores keep strategy order
    return sorted(options, key=lambda o: o.overall_score, reverse=True)


def format_layout_summary(option: LayoutOption) -> str:
    return (
        f"{option.run_count} run(s), {option.total_meters:.1f}m total, "
        f"{option.total_waste_meters:.1f}m waste, "
        f"{option.overall_score}% score"
    )
