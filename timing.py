# timing.py - labelgang ver1.0
# Production time estimate for a layout option.

import math
from typing import Optional

from models import DEFAULT_PRESS, LayoutOption, PressConfig


def estimate_production_time(option: LayoutOption, press: Optional[PressConfig] = None) -> int:
    """
    minutes = setup + (runs - 1) * changeover + frames * per_frame,
    rounded up to a whole minute.
    """
    press = press or DEFAULT_PRESS
    changeovers = max(0, option.run_count - 1)
    minutes = (
        press.setup_minutes +
        changeovers * press.changeover_minutes +
        option.total_frames * press.per_frame_minutes
    )
    return math.ceil(round(minutes, 9))
