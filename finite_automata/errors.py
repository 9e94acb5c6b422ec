"""
Exception hierarchy for finite_automata.

Construction problems raise a SpecValidationError subclass naming the
offending field and value. Feeding a symbol outside the alphabet raises
UnknownSymbolError. A missing transition is never raised; the engines
absorb it into their error state.
"""

from typing import Any, Dict, Optional


class AutomatonError(Exception):
    """Root of every error raised by this package."""
    pass


class SpecValidationError(AutomatonError, ValueError):
    """Raised when an automaton spec is malformed. Construction is aborted."""

    _MISSING = object()

    def __init__(self, message: str, field: str, value: Any = _MISSING):
        self.field = field
        self.has_value = value is not SpecValidationError._MISSING
        self.value = value if self.has_value else None
        self.value_type = type(value).__name__ if self.has_value else None
        if self.has_value:
            message = f"{message} (field={field}, value={value!r}, type={self.value_type})"
        else:
            message = f"{message} (field={field})"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Payload used by the API error responses."""
        return {
            "error": str(self),
            "error_type": type(self).__name__,
            "field": self.field,
            "value": self.value if _is_jsonable(self.value) else repr(self.value),
            "value_type": self.value_type,
        }


class MissingFieldError(SpecValidationError):
    def __init__(self, field: str):
        super().__init__(f"spec property '{field}' is not defined", field)


class FieldTypeError(SpecValidationError):
    def __init__(self, field: str, value: Any, expected: str = "a list"):
        super().__init__(f"spec property '{field}' must be {expected}", field, value)


class InvalidAlphabetSymbolError(SpecValidationError):
    pass


class DuplicateAlphabetSymbolError(SpecValidationError):
    pass


class InvalidStateError(SpecValidationError):
    pass


class DuplicateStateError(SpecValidationError):
    pass


class InvalidInitialStateError(SpecValidationError):
    pass


class InvalidFinalStateError(SpecValidationError):
    pass


class DuplicateFinalStateError(SpecValidationError):
    pass


class UnknownFinalStateError(SpecValidationError):
    pass


class TransitionArityError(SpecValidationError):
    pass


class TransitionTypeError(SpecValidationError):
    pass


class UnknownTransitionStateError(SpecValidationError):
    pass


class UnknownTransitionSymbolError(SpecValidationError):
    pass


class NonDeterministicTransitionError(SpecValidationError):
    """Two transitions share the same (source, symbol) pair in a DFA spec."""

    def __init__(self, source: str, symbol: str, transition: Any):
        self.source = source
        self.symbol = symbol
        super().__init__(
            f"transition results in non-deterministic behavior: state '{source}' "
            f"already has a transition on '{symbol}'",
            "transitions",
            transition,
        )


class UnknownSymbolError(AutomatonError, ValueError):
    """Raised by transition() for a symbol outside the alphabet."""

    def __init__(self, symbol: Any):
        self.symbol = symbol
        super().__init__(
            f"symbol {symbol!r} of type {type(symbol).__name__} is not part of the alphabet"
        )


class SpecLoadError(AutomatonError):
    """Raised when a spec file cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"could not load spec from {path}: {reason}")


def _is_jsonable(value: Optional[Any]) -> bool:
    if value is None or isinstance(value, (str, int, float, bool)):
        return True
    if isinstance(value, (list, tuple)):
        return all(_is_jsonable(v) for v in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and _is_jsonable(v) for k, v in value.items())
    return False
