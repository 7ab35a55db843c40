# reasoning.py - labelgang ver1.0
# Short advisory explanation of a run set. Never parsed by other modules.

from typing import List

from models import Item, ProposedRun
from scoring import EfficiencyScores, total_frames, total_meters


def explain(runs: List[ProposedRun], items: List[Item], scores: EfficiencyScores) -> str:
    run_count = len(runs)
    total_labels = sum(it.quantity for it in items)

    parts = [
        f"{run_count} run{'' if run_count == 1 else 's'} printing {total_labels:,} labels",
        f"{total_meters(runs):.1f}m of substrate ({total_frames(runs)} frames)",
    ]

    material = scores.material_pct
    if material >= 90:
        parts.append("Excellent material utilization")
    elif material >= 75:
        parts.append("Good material efficiency")
    else:
        parts.append("Some material waste expected")

    if run_count == 1:
        parts.append("Single-run simplicity")
    elif scores.labor_pct >= 85:
        parts.append("Well-balanced slot usage")

    return ". ".join(parts) + "."
