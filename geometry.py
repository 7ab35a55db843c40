# geometry.py - labelgang ver1.0
#
# Converts dieline geometry into labels-per-meter, meters-for-a-quantity and
# frames-for-a-length. Every other module depends on these.

import math
from typing import List

from models import Dieline, PressConfig


# ---------------------------------------
# Rounding helpers
# ---------------------------------------

def _ceil(x: float) -> int:
    # round first so 2.88 / 0.96 does not become 3.0000000000000004 -> 4
    return math.ceil(round(x, 9))


def ceil_to_cents(meters: float) -> float:
    """Round a length up to two decimals (1 cm)."""
    return _ceil(meters * 100) / 100


# ---------------------------------------
# Dieline checks
# ---------------------------------------

def dieline_problems(dieline: Dieline) -> List[str]:
    problems = []
    for name in ("roll_width_mm", "label_width_mm", "label_height_mm"):
        if getattr(dieline, name) <= 0:
            problems.append(f"{name} must be positive, got {getattr(dieline, name)}")
    for name in ("columns_across", "rows_around"):
        value = getattr(dieline, name)
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            problems.append(f"{name} must be a positive integer, got {value!r}")
    for name in ("horizontal_gap_mm", "vertical_gap_mm"):
        if getattr(dieline, name) < 0:
            problems.append(f"{name} must not be negative, got {getattr(dieline, name)}")
    if dieline.label_height_mm + dieline.vertical_gap_mm <= 0:
        problems.append("label_height_mm + vertical_gap_mm must be positive")
    return problems


def validate_dieline(dieline: Dieline, press: PressConfig) -> None:
    """
    Raises ValueError listing every geometry problem, including a label
    pitch longer than the press frame (zero labels per frame).
    """
    problems = dieline_problems(dieline)
    if not problems:
        pitch = dieline.label_height_mm + dieline.vertical_gap_mm
        if math.floor(press.max_frame_length_mm / pitch) < 1:
            problems.append(
                f"label pitch {pitch} mm exceeds max frame length "
                f"{press.max_frame_length_mm} mm"
            )
    if press.meters_per_frame <= 0:
        problems.append("meters_per_frame must be positive")

    if problems:
        msg = "Invalid dieline geometry:\n"
        msg += "\n".join(f"- {p}" for p in problems)
        raise ValueError(msg)


# ---------------------------------------
# Core conversions
# ---------------------------------------

def lane_labels_per_frame(dieline: Dieline, press: PressConfig) -> int:
    """Labels one column produces in one frame."""
    pitch = dieline.label_height_mm + dieline.vertical_gap_mm
    return math.floor(press.max_frame_length_mm / pitch)


def labels_per_frame(dieline: Dieline, press: PressConfig) -> int:
    """Labels the whole roll width produces in one frame."""
    return lane_labels_per_frame(dieline, press) * dieline.columns_across


def lane_labels_per_meter(dieline: Dieline, press: PressConfig) -> float:
    return lane_labels_per_frame(dieline, press) / press.meters_per_frame


def labels_per_meter(dieline: Dieline, press: PressConfig) -> float:
    """Labels per meter of roll across all columns."""
    return lane_labels_per_meter(dieline, press) * dieline.columns_across


def frames_for_meters(meters: float, press: PressConfig) -> int:
    return _ceil(meters / press.meters_per_frame)


def meters_for_quantity(quantity: int, dieline: Dieline, press: PressConfig) -> float:
    """
    Roll length needed to print `quantity` labels across the full width,
    rounded up to a whole number of frames (never under-prints).
    """
    frames = _ceil(quantity / labels_per_frame(dieline, press))
    return round(frames * press.meters_per_frame, 6)
