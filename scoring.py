# scoring.py - labelgang ver1.0
#
# Computes material, print and labor efficiency for a candidate run set,
# plus the weighted overall score. Percent rounding happens here; text and
# PDF formatting happen elsewhere.

import math
from dataclasses import dataclass
from typing import List

from models import Dieline, Item, OptimizationWeights, PressConfig, ProposedRun
from geometry import labels_per_meter


# -------------------------------------------------------------
# Data structures
# -------------------------------------------------------------

@dataclass(frozen=True)
class EfficiencyScores:
    material: float     # 0..1
    printing: float     # 0..1
    labor: float        # 0..1
    overall: float      # weighted sum

    @property
    def material_pct(self) -> int:
        return to_percent(self.material)

    @property
    def print_pct(self) -> int:
        return to_percent(self.printing)

    @property
    def labor_pct(self) -> int:
        return to_percent(self.labor)

    @property
    def overall_pct(self) -> int:
        return to_percent(self.overall)


# -------------------------------------------------------------
# Helpers
# -------------------------------------------------------------

def to_percent(ratio: float) -> int:
    """0..1 ratio to an integer percentage, halves rounded up."""
    return int(math.floor(round(ratio * 100, 9) + 0.5))


def total_meters(runs: List[ProposedRun]) -> float:
    return sum(r.meters for r in runs)


def total_frames(runs: List[ProposedRun]) -> int:
    return sum(r.frames for r in runs)


def theoretical_min_meters(items: List[Item], dieline: Dieline, press: PressConfig) -> float:
    """Roll length with zero rounding waste."""
    total_labels = sum(it.quantity for it in items)
    return total_labels / labels_per_meter(dieline, press)


# -------------------------------------------------------------
# Main score computation
# -------------------------------------------------------------

def score_runs(
    runs: List[ProposedRun],
    items: List[Item],
    dieline: Dieline,
    weights: OptimizationWeights,
    press: PressConfig
) -> EfficiencyScores:

    slots = dieline.columns_across
    run_count = len(runs)
    if run_count == 0:
        return EfficiencyScores(material=0.0, printing=0.0, labor=0.0, overall=0.0)

    # --- MATERIAL ---
    meters = total_meters(runs)
    theoretical = theoretical_min_meters(items, dieline, press)
    material = min(1.0, theoretical / meters) if meters > 0 else 0.0

    # --- PRINT ---
    min_runs = math.ceil(len(items) / slots)
    print_eff = min(1.0, min_runs / run_count)

    # --- LABOR ---
    used = sum(len(r.slot_assignments) for r in runs)
    labor = used / (run_count * slots)

    overall = (
        material * weights.material_efficiency +
        print_eff * weights.print_efficiency +
        labor * weights.labor_efficiency
    )

    return EfficiencyScores(material=material, printing=print_eff, labor=labor, overall=overall)
