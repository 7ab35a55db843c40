# strategies.py - labelgang ver1.0
#
# Three heuristics that gang items into sequential runs and assign
# quantities to slots across the roll width:
#   balanced      - first-fit-decreasing style ganging
#   minimal_waste - best-fit grouping by similar remaining quantity
#   simple        - one dedicated run per item
# All state (remaining quantities, run accumulators) is local to one call.

from typing import Callable, Dict, List, Optional, Tuple

from models import Dieline, Item, PressConfig, ProposedRun, SlotAssignment
from geometry import ceil_to_cents, frames_for_meters, lane_labels_per_meter


# -------------------------------------------------------------
# Shared helpers
# -------------------------------------------------------------

def _remaining_map(items: List[Item]) -> Dict[str, int]:
    # dicts keep insertion order, which drives tie-breaking
    return {it.id: it.quantity for it in items}


def _largest_remaining(remaining: Dict[str, int]) -> Tuple[Optional[str], int]:
    """First item with the strictly largest remaining quantity."""
    best_id, best_qty = None, 0
    for item_id, qty in remaining.items():
        if qty > best_qty:
            best_id, best_qty = item_id, qty
    return best_id, best_qty


def close_run(
    run_number: int,
    assignments: List[SlotAssignment],
    dieline: Dieline,
    press: PressConfig
) -> ProposedRun:
    """
    A run is as long as its fullest slot; every other slot prints for the
    same length.
    """
    per_lane = lane_labels_per_meter(dieline, press)
    longest = max((a.quantity_in_slot for a in assignments), default=0)
    meters = ceil_to_cents(longest / per_lane)
    return ProposedRun(
        run_number=run_number,
        slot_assignments=tuple(assignments),
        meters=meters,
        frames=frames_for_meters(meters, press)
    )


# -------------------------------------------------------------
# Balanced (first-fit decreasing)
# -------------------------------------------------------------

def balanced_runs(items: List[Item], dieline: Dieline, press: PressConfig) -> List[ProposedRun]:
    """
    Each slot takes the item with the largest remaining quantity. The
    quantity placed is bounded by the run target: the largest single-slot
    requirement seen so far in this run, each requirement capped at
    press.slot_quantity_cap so one big item cannot monopolise a run.
    """
    slots = dieline.columns_across
    ordered = sorted(items, key=lambda it: it.quantity, reverse=True)
    remaining = _remaining_map(ordered)

    runs: List[ProposedRun] = []

    while any(q > 0 for q in remaining.values()):
        assignments: List[SlotAssignment] = []
        target = 0

        for slot in range(slots):
            best_id, best_qty = _largest_remaining(remaining)
            if best_id is None:
                continue   # nothing left, slot stays empty

            target = max(target, min(best_qty, press.slot_quantity_cap))
            qty = min(best_qty, target)
            if qty <= 0:
                continue

            assignments.append(SlotAssignment(slot=slot, item_id=best_id, quantity_in_slot=qty))
            remaining[best_id] -= qty

        if not assignments:
            break

        runs.append(close_run(len(runs) + 1, assignments, dieline, press))

    return runs


# -------------------------------------------------------------
# Minimal waste (best fit)
# -------------------------------------------------------------

def minimal_waste_runs(items: List[Item], dieline: Dieline, press: PressConfig) -> List[ProposedRun]:
    """
    Group items whose remaining quantity is within similarity_ratio of the
    largest remaining, so a huge item never shares a run with a tiny one.
    """
    slots = dieline.columns_across
    remaining = _remaining_map(items)

    runs: List[ProposedRun] = []

    while any(q > 0 for q in remaining.values()):
        active = sorted(
            (it for it in items if remaining[it.id] > 0),
            key=lambda it: remaining[it.id],
            reverse=True
        )
        target = remaining[active[0].id]

        selected = [
            it for it in active
            if remaining[it.id] >= target * press.similarity_ratio
        ][:slots]
        if not selected:
            # fallback: whatever is left
            selected = active[:slots]

        assignments: List[SlotAssignment] = []
        for slot, it in enumerate(selected):
            qty = min(remaining[it.id], target)
            assignments.append(SlotAssignment(slot=slot, item_id=it.id, quantity_in_slot=qty))
            remaining[it.id] -= qty

        if not assignments:
            break

        runs.append(close_run(len(runs) + 1, assignments, dieline, press))

    return runs


# -------------------------------------------------------------
# Simple (one run per item)
# -------------------------------------------------------------

def simple_runs(items: List[Item], dieline: Dieline, press: PressConfig) -> List[ProposedRun]:
    slots = dieline.columns_across
    runs: List[ProposedRun] = []

    for it in items:
        per_slot = -(-it.quantity // slots)   # ceil
        left = it.quantity

        assignments: List[SlotAssignment] = []
        for slot in range(slots):
            qty = min(per_slot, left)
            if qty <= 0:
                break
            assignments.append(SlotAssignment(slot=slot, item_id=it.id, quantity_in_slot=qty))
            left -= qty

        runs.append(close_run(len(runs) + 1, assignments, dieline, press))

    return runs


# -------------------------------------------------------------
# Registry (generation order matters for tie-breaking)
# -------------------------------------------------------------

Strategy = Callable[[List[Item], Dieline, PressConfig], List[ProposedRun]]

STRATEGIES: List[Tuple[str, Strategy]] = [
    ("Balanced", balanced_runs),
    ("Minimal Waste", minimal_waste_runs),
    ("Simple", simple_runs),
]
