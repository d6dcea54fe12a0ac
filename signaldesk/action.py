"""
Trade signal strength.

An `Action` is a directional strength in [-1, +1]: positive values are buy
signals, negative values are sell signals and 0 means no signal. Full
strength (+1 / -1) is what crossing- and threshold-based indicators emit;
fractional strengths are available for indicators that grade confidence.
"""

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Action:
    """Bounded signal strength. Values outside [-1, 1] are clamped, NaN becomes 0."""

    strength: float = 0.0

    BUY_ALL: ClassVar["Action"]
    SELL_ALL: ClassVar["Action"]
    NONE: ClassVar["Action"]

    def __post_init__(self) -> None:
        value = float(self.strength)
        if math.isnan(value):
            value = 0.0
        object.__setattr__(self, "strength", max(-1.0, min(1.0, value)))

    @classmethod
    def from_sign(cls, value: float) -> "Action":
        """Full-strength action in the direction of `value` (none for 0 or NaN)."""
        if value > 0:
            return cls.BUY_ALL
        if value < 0:
            return cls.SELL_ALL
        return cls.NONE

    @property
    def is_buy(self) -> bool:
        return self.strength > 0

    @property
    def is_sell(self) -> bool:
        return self.strength < 0

    @property
    def is_none(self) -> bool:
        return self.strength == 0

    def sign(self) -> int:
        """Direction only: 1, -1 or 0."""
        return (self.strength > 0) - (self.strength < 0)

    def __float__(self) -> float:
        return self.strength

    def __neg__(self) -> "Action":
        return Action(-self.strength)

    def __str__(self) -> str:
        if self.is_none:
            return "none"
        side = "buy" if self.is_buy else "sell"
        return f"{side}({abs(self.strength):g})"


Action.BUY_ALL = Action(1.0)
Action.SELL_ALL = Action(-1.0)
Action.NONE = Action(0.0)
