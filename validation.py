# validation.py - labelgang ver1.0
#
# Boundary checks on optimizer inputs (raise ValueError), and the advisory
# coverage check of a produced layout option (never raises).

from typing import Dict, List

from models import Item, LayoutOption, OptimizationWeights, PressConfig, ValidationResult


# ---------------------------------------
# Input checks before optimizing
# ---------------------------------------

def validate_items(items: List[Item]) -> None:
    """
    Rejects non-positive or non-integer quantities and duplicate ids.
    Raises ValueError listing all violations.
    """
    problems = []
    seen = set()
    for it in items:
        q = it.quantity
        if not isinstance(q, int) or isinstance(q, bool):
            problems.append(f"{it.name}: quantity must be an integer, got {q!r}")
        elif q <= 0:
            problems.append(f"{it.name}: quantity must be positive, got {q}")
        if it.id in seen:
            problems.append(f"{it.name}: duplicate item id '{it.id}'")
        seen.add(it.id)

    if problems:
        msg = "Invalid items:\n"
        msg += "\n".join(f"- {p}" for p in problems)
        raise ValueError(msg)


def validate_weights(weights: OptimizationWeights) -> None:
    negative = [
        name for name in ("material_efficiency", "print_efficiency", "labor_efficiency")
        if getattr(weights, name) < 0
    ]
    if negative:
        raise ValueError(f"Optimization weights must not be negative: {', '.join(negative)}")


def validate_press(press: PressConfig) -> None:
    """
    Rejects press constants the strategies cannot work with. Frame length
    and meters per frame are checked with the dieline.
    """
    problems = []
    cap = press.slot_quantity_cap
    if not isinstance(cap, int) or isinstance(cap, bool) or cap <= 0:
        problems.append(f"slot_quantity_cap must be a positive integer, got {cap!r}")
    if not 0 < press.similarity_ratio <= 1:
        problems.append(f"similarity_ratio must be in (0, 1], got {press.similarity_ratio}")
    for name in ("setup_minutes", "changeover_minutes", "per_frame_minutes"):
        if getattr(press, name) < 0:
            problems.append(f"{name} must not be negative, got {getattr(press, name)}")
    if press.roll_tolerance < 0:
        problems.append(f"roll_tolerance must not be negative, got {press.roll_tolerance}")

    if problems:
        msg = "Invalid press constants:\n"
        msg += "\n".join(f"- {p}" for p in problems)
        raise ValueError(msg)


# ---------------------------------------
# Coverage check of a layout option
# ---------------------------------------

def assigned_quantities(option: LayoutOption) -> Dict[str, int]:
    assigned: Dict[str, int] = {}
    for run in option.runs:
        for a in run.slot_assignments:
            assigned[a.item_id] = assigned.get(a.item_id, 0) + a.quantity_in_slot
    return assigned


def validate_layout(option: LayoutOption, items: List[Item]) -> ValidationResult:
    """
    Compares the summed quantity_in_slot per item against each item's
    required quantity. Callers decide what to do with an invalid option.
    """
    assigned = assigned_quantities(option)

    errors = []
    for it in items:
        got = assigned.get(it.id, 0)
        if got < it.quantity:
            errors.append(f"{it.name}: Missing {it.quantity - got} labels")
        elif got > it.quantity:
            errors.append(f"{it.name}: Over-assigned by {got - it.quantity} labels")

    return ValidationResult(valid=not errors, errors=tuple(errors))
