# rolls.py - labelgang ver1.0
#
# Splitting one slot's output into finished rolls when it exceeds the
# customer's quantity per roll.

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from models import DEFAULT_PRESS, PressConfig


@dataclass(frozen=True)
class Roll:
    roll_number: int
    label_count: int


@dataclass(frozen=True)
class RollSplitOption:
    strategy: str        # 'fill_first' or 'even'
    label: str
    rolls: Tuple[Roll, ...]


def format_roll_label(counts: List[int]) -> str:
    """
    "500 + 508" for up to four rolls, grouped beyond that: "8 x 500 + 5".
    """
    if len(counts) <= 4:
        return " + ".join(f"{c:,}" for c in counts)

    grouped: Dict[int, int] = {}
    for c in counts:
        grouped[c] = grouped.get(c, 0) + 1

    parts = []
    for count, times in grouped.items():
        parts.append(f"{times} x {count:,}" if times > 1 else f"{count:,}")
    return " + ".join(parts)


def plan_roll_splits(
    labels_per_slot: int,
    qty_per_roll: int,
    press: Optional[PressConfig] = None
) -> List[RollSplitOption]:
    """
    Returns no options when the slot output fits on one roll.

    fill_first: full rolls first, a last roll of at most roll_tolerance
                labels merged into the previous one.
    even:       same roll count, counts differ by at most one. Only
                offered when it differs from fill_first.
    """
    press = press or DEFAULT_PRESS
    if qty_per_roll <= 0:
        raise ValueError(f"qty_per_roll must be positive, got {qty_per_roll}")
    if labels_per_slot <= qty_per_roll:
        return []

    counts: List[int] = []
    left = labels_per_slot
    while left > 0:
        c = min(qty_per_roll, left)
        counts.append(c)
        left -= c

    if len(counts) >= 2 and counts[-1] <= press.roll_tolerance:
        last = counts.pop()
        counts[-1] += last

    options = [
        RollSplitOption(
            strategy="fill_first",
            label=f"Fill first: {format_roll_label(counts)}",
            rolls=tuple(Roll(i + 1, c) for i, c in enumerate(counts))
        )
    ]

    n = len(counts)
    base, extra = divmod(labels_per_slot, n)
    even = [base + (1 if i < extra else 0) for i in range(n)]
    if even[0] != counts[0]:
        options.append(RollSplitOption(
            strategy="even",
            label=f"Even split: {format_roll_label(even)}",
            rolls=tuple(Roll(i + 1, c) for i, c in enumerate(even))
        ))

    return options
