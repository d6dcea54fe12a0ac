"""Crossing detector."""

import math

from signaldesk.action import Action


def sign(value: float) -> float:
    """Return 1.0 for positive, -1.0 for negative and 0.0 for zero or NaN."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


class Cross:
    """
    Detects one series crossing another.

    Tracks whether `value` was last below, above or equal to `base` and
    emits a full-strength action only on the step the relation flips:

      - below/equal -> above: buy
      - above/equal -> below: sell
      - anything else (including the very first step): no signal

    Equality is a buffer state, so touching the base and returning to the
    same side never fires. A NaN comparison gives no signal and forgets the
    previous side, so the next comparable step only re-initialises. Every
    step must be fed; a crossing that starts and ends between two calls is
    not seen.
    """

    def __init__(self) -> None:
        self._last: float | None = None

    def next(self, value: float, base: float) -> Action:
        diff = value - base
        if math.isnan(diff):
            self._last = None
            return Action.NONE

        current = sign(diff)
        last, self._last = self._last, current

        if last is None or current == last or current == 0.0:
            return Action.NONE

        return Action.from_sign(current)

    def __repr__(self) -> str:
        return f"Cross(last={self._last})"
