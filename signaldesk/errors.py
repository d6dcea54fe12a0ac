"""Exceptions raised by indicator configurations."""


class IndicatorError(Exception):
    """Base class for all signaldesk indicator errors."""


class WrongConfigurationError(IndicatorError):
    """An indicator configuration failed validation and cannot be initialised."""

    def __init__(self, name: str, params: dict[str, str] | None = None):
        self.name = name
        self.params = params or {}
        detail = ", ".join(f"{k}={v}" for k, v in self.params.items())
        super().__init__(f"Wrong configuration for {name}({detail})")


class ParameterParseError(IndicatorError, ValueError):
    """
    A named configuration field could not be set.

    Raised both when the raw value does not parse into the field's type and
    when the field name itself is unknown.

    Attributes:
        field: The field name as supplied by the caller
        value: The raw textual value as supplied by the caller
    """

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Unable to parse parameter {field!r} from value {value!r}")
