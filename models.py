# models.py - labelgang ver1.0
# Data structures for items, dielines, press constants, runs and layout options.

from dataclasses import dataclass
from typing import Tuple


# ------------------------------
# Inputs
# ------------------------------

@dataclass(frozen=True)
class Item:
    id: str
    quantity: int       # finished labels required
    name: str


@dataclass(frozen=True)
class Dieline:
    roll_width_mm: float
    label_width_mm: float
    label_height_mm: float     # along the web (around)
    columns_across: int        # physical slots side-by-side on the roll
    rows_around: int
    horizontal_gap_mm: float
    vertical_gap_mm: float


@dataclass(frozen=True)
class OptimizationWeights:
    material_efficiency: float = 0.4
    print_efficiency: float = 0.35
    labor_efficiency: float = 0.25


DEFAULT_WEIGHTS = OptimizationWeights()


@dataclass(frozen=True)
class PressConfig:
    """
    Fixed press constants. Passed explicitly so alternative press
    geometries can be optimized without touching module state.
    """
    max_frame_length_mm: float = 960.0
    meters_per_frame: float = 0.96
    setup_minutes: float = 15.0
    changeover_minutes: float = 2.0
    per_frame_minutes: float = 0.5
    slot_quantity_cap: int = 10000     # soft ceiling per item per slot (balanced)
    similarity_ratio: float = 0.5      # grouping threshold (minimal waste)
    roll_tolerance: int = 50           # tiny last roll merged into previous


DEFAULT_PRESS = PressConfig()


# ------------------------------
# Proposed layout
# ------------------------------

@dataclass(frozen=True)
class SlotAssignment:
    slot: int
    item_id: str
    quantity_in_slot: int


@dataclass(frozen=True)
class ProposedRun:
    run_number: int
    slot_assignments: Tuple[SlotAssignment, ...]
    meters: float
    frames: int

    def max_slot_quantity(self) -> int:
        return max((a.quantity_in_slot for a in self.slot_assignments), default=0)


@dataclass(frozen=True)
class LayoutOption:
    """
    A candidate plan. Scores are 0-100 integers; overall_score is the
    weighted sum scaled the same way (it can exceed 100 when the weights
    sum to more than 1).
    """
    id: str
    runs: Tuple[ProposedRun, ...]
    total_meters: float
    total_frames: int
    total_waste_meters: float
    material_efficiency_score: int
    print_efficiency_score: int
    labor_efficiency_score: int
    overall_score: int
    reasoning: str

    @property
    def run_count(self) -> int:
        return len(self.runs)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: Tuple[str, ...] = ()
