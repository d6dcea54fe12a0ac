"""Base classes for indicator configurations and running instances."""

import abc
import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Sequence

from signaldesk.action import Action
from signaldesk.errors import ParameterParseError, WrongConfigurationError
from signaldesk.marketdata import Candle

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndicatorResult:
    """
    Output of one indicator step.

    Attributes:
        values: Numeric outputs, in the order the indicator declares them
        signals: Trade signals, in the order the indicator declares them
    """

    values: tuple[float, ...]
    signals: tuple[Action, ...]

    @classmethod
    def new(cls, values: Sequence[float], signals: Sequence[Action]) -> "IndicatorResult":
        return cls(tuple(float(v) for v in values), tuple(signals))

    @property
    def size(self) -> tuple[int, int]:
        return len(self.values), len(self.signals)

    def value(self, index: int) -> float:
        return self.values[index]

    def signal(self, index: int) -> Action:
        return self.signals[index]


class IndicatorConfig(abc.ABC):
    """
    Abstract base class for indicator configurations.

    Subclasses are dataclasses declaring their parameters as fields, plus:

      - NAME:   indicator name used in config files and error messages
      - FIELDS: settable field name -> parser from text to the field's type
      - SIZE:   (value count, signal count) of every result

    A configuration is checked with `validate()` and turned into a running
    instance with `init(first_candle)`; the instance works on a private copy,
    so later edits to the configuration do not leak into it.
    """

    NAME: ClassVar[str]
    FIELDS: ClassVar[dict[str, Callable[[str], Any]]]
    SIZE: ClassVar[tuple[int, int]]

    @abc.abstractmethod
    def validate(self) -> bool:
        """Return True when every parameter is within its valid domain."""
        raise NotImplementedError

    @abc.abstractmethod
    def _create(self, candle: Candle) -> "IndicatorInstance":
        """Build the running instance from an already validated private copy."""
        raise NotImplementedError

    def init(self, candle: Candle) -> "IndicatorInstance":
        """
        Create a running instance, seeded from the first candle.

        Raises:
            WrongConfigurationError: If `validate()` returns False
        """
        if not self.validate():
            raise WrongConfigurationError(self.NAME, self.params())

        log.debug("Initialising %s with %s", self.NAME, self.params())
        return copy.copy(self)._create(candle)

    def set(self, name: str, value: str) -> None:
        """
        Assign a field from its textual representation.

        Raises:
            ParameterParseError: If `name` is not a settable field or `value`
                cannot be parsed into that field's type
        """
        parser = self.FIELDS.get(name)
        if parser is None:
            raise ParameterParseError(name, value)

        try:
            parsed = parser(value)
        except (TypeError, ValueError) as e:
            raise ParameterParseError(name, value) from e

        setattr(self, name, parsed)
        log.debug("%s.%s set to %s", self.NAME, name, parsed)

    def size(self) -> tuple[int, int]:
        """(number of values, number of signals) produced on every step."""
        return self.SIZE

    @classmethod
    def field_names(cls) -> list[str]:
        return list(cls.FIELDS)

    def params(self) -> dict[str, str]:
        """Textual form of every settable field, accepted back by `set()`."""
        return {name: str(getattr(self, name)) for name in self.FIELDS}


class IndicatorInstance(abc.ABC):
    """Abstract base class for running indicator state."""

    def __init__(self, cfg: IndicatorConfig):
        self._cfg = cfg

    @property
    def config(self) -> IndicatorConfig:
        """
        A copy of the configuration this instance was created from.

        Editing the returned object changes neither the instance nor what
        later calls to `config` report.
        """
        return copy.copy(self._cfg)

    def size(self) -> tuple[int, int]:
        return self._cfg.size()

    @abc.abstractmethod
    def next(self, candle: Candle) -> IndicatorResult:
        """Advance the indicator by one candle and return this step's result."""
        raise NotImplementedError

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v}" for k, v in self._cfg.params().items())
        return f"{self.__class__.__name__}({params})"
