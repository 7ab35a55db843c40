# io_utils.py - labelgang ver1.0
# Reading the items CSV, parsing config.properties into dieline, press
# constants and weights.

import csv
from typing import Dict, List, Optional

from models import DEFAULT_PRESS, DEFAULT_WEIGHTS, Dieline, Item, OptimizationWeights, PressConfig


# ------------------------------
# Boolean parser
# ------------------------------

def parse_bool(val: Optional[str]) -> bool:
    if val is None:
        return False
    v = val.strip().lower()
    return v in ("1", "true", "yes", "y", "on")


# ------------------------------
# Config parser (strict one key per line)
# ------------------------------

def parse_properties(path: str) -> Dict[str, str]:
    """
    Conservative parser:
    - One key=value per line
    - Lines without '=' are ignored
    - '#' at start of line = comment
    """
    props: Dict[str, str] = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, val = line.split("=", 1)
            props[key.strip()] = val.strip()
    return props


def _number(cfg: Dict[str, str], key: str, default: Optional[float] = None) -> float:
    raw = cfg.get(key)
    if raw is None or raw == "":
        if default is None:
            raise ValueError(f"config.properties missing required key '{key}'")
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"config.properties key '{key}' is not a number: {raw!r}") from None


def _integer(cfg: Dict[str, str], key: str, default: Optional[int] = None) -> int:
    value = _number(cfg, key, default)
    if value != int(value):
        raise ValueError(f"config.properties key '{key}' must be a whole number, got {value}")
    return int(value)


# ------------------------------
# Dieline / press / weights
# ------------------------------

def parse_dieline(cfg: Dict[str, str]) -> Dieline:
    return Dieline(
        roll_width_mm=_number(cfg, "roll-width"),
        label_width_mm=_number(cfg, "label-width"),
        label_height_mm=_number(cfg, "label-height"),
        columns_across=_integer(cfg, "columns-across"),
        rows_around=_integer(cfg, "rows-around"),
        horizontal_gap_mm=_number(cfg, "horizontal-gap", 0.0),
        vertical_gap_mm=_number(cfg, "vertical-gap", 0.0)
    )


def parse_press_config(cfg: Dict[str, str]) -> PressConfig:
    d = DEFAULT_PRESS
    return PressConfig(
        max_frame_length_mm=_number(cfg, "max-frame-length", d.max_frame_length_mm),
        meters_per_frame=_number(cfg, "meters-per-frame", d.meters_per_frame),
        setup_minutes=_number(cfg, "setup-minutes", d.setup_minutes),
        changeover_minutes=_number(cfg, "changeover-minutes", d.changeover_minutes),
        per_frame_minutes=_number(cfg, "per-frame-minutes", d.per_frame_minutes),
        slot_quantity_cap=_integer(cfg, "slot-quantity-cap", d.slot_quantity_cap),
        similarity_ratio=_number(cfg, "similarity-ratio", d.similarity_ratio),
        roll_tolerance=_integer(cfg, "roll-tolerance", d.roll_tolerance)
    )


def parse_weights(cfg: Dict[str, str]) -> OptimizationWeights:
    d = DEFAULT_WEIGHTS
    return OptimizationWeights(
        material_efficiency=_number(cfg, "weight-material", d.material_efficiency),
        print_efficiency=_number(cfg, "weight-print", d.print_efficiency),
        labor_efficiency=_number(cfg, "weight-labor", d.labor_efficiency)
    )


def parse_qty_per_roll(cfg: Dict[str, str]) -> Optional[int]:
    """Labels per finished roll, or None when roll splitting is off."""
    if not cfg.get("qty-per-roll"):
        return None
    qty = _integer(cfg, "qty-per-roll")
    if qty <= 0:
        raise ValueError(f"config.properties key 'qty-per-roll' must be positive, got {qty}")
    return qty


def parse_pdf_margin(cfg: Dict[str, str]) -> float:
    """Page margin of the run sheet in mm (default 10)."""
    margin = _number(cfg, "margin", 10.0)
    if margin < 0:
        raise ValueError(f"config.properties key 'margin' must not be negative, got {margin}")
    return margin


# ------------------------------
# Items CSV
# ------------------------------

def parse_items(path: str) -> List[Item]:
    items: List[Item] = []
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        required = {"id", "name", "quantity"}
        if not required.issubset(set(reader.fieldnames or [])):
            raise ValueError("items.csv missing required columns (id, name, quantity)")

        for row in reader:
            item_id = (row["id"] or "").strip()
            if not item_id:
                continue

            name = (row["name"] or "").strip() or item_id
            raw_qty = (row["quantity"] or "").strip()
            try:
                quantity = int(raw_qty)
            except ValueError:
                raise ValueError(f"items.csv: quantity for '{name}' is not a whole number: {raw_qty!r}") from None

            items.append(Item(id=item_id, quantity=quantity, name=name))

    # Ensure uniqueness
    ids = [i.id for i in items]
    if len(ids) != len(set(ids)):
        raise ValueError("Item ids must be unique.")

    return items
