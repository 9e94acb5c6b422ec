from typing import Any, FrozenSet, Type

from .errors import (
    DuplicateAlphabetSymbolError,
    DuplicateFinalStateError,
    DuplicateStateError,
    FieldTypeError,
    InvalidAlphabetSymbolError,
    InvalidFinalStateError,
    InvalidInitialStateError,
    InvalidStateError,
    MissingFieldError,
    SpecValidationError,
    UnknownFinalStateError,
)
from .models import AutomatonSpec, ValidatedSpec

# (wire name, attribute name)
REQUIRED_FIELDS = [
    ("alphabet", "alphabet"),
    ("states", "states"),
    ("initialState", "initial_state"),
    ("finalStates", "final_states"),
    ("transitions", "transitions"),
]


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_missing(value: Any) -> bool:
    # empty lists are present; any other falsy value is not
    return value is None or (not value and not is_sequence(value))


class SpecValidator:
    """
    Checks a raw spec and produces the validated alphabet, states, final
    states and initial state. The first failing check is the one reported:

        1. presence of every field
        2. alphabet (list shape, then entries)
        3. states (list shape, then entries)
        4. initial state
        5. final states (list shape, then entries)

    Transitions, list shape included, are checked by the table builders,
    which know whether a repeated (state, symbol) pair is legal.
    """

    def validate(self, raw: Any) -> ValidatedSpec:
        spec = AutomatonSpec.coerce(raw)

        for wire_name, attr in REQUIRED_FIELDS:
            value = getattr(spec, attr)
            if is_missing(value):
                raise MissingFieldError(wire_name)

        alphabet = self._collect_identifiers(
            spec.alphabet, "alphabet", "symbol in alphabet",
            InvalidAlphabetSymbolError, DuplicateAlphabetSymbolError,
        )
        states = self._collect_identifiers(
            spec.states, "states", "state",
            InvalidStateError, DuplicateStateError,
        )
        initial_state = self._check_initial_state(spec.initial_state, states)
        final_states = self._collect_final_states(spec.final_states, states)

        return ValidatedSpec(
            alphabet=alphabet,
            states=states,
            final_states=final_states,
            initial_state=initial_state,
        )

    def _collect_identifiers(
        self,
        entries,
        field: str,
        noun: str,
        invalid: Type[SpecValidationError],
        duplicate: Type[SpecValidationError],
    ) -> FrozenSet[str]:
        if not is_sequence(entries):
            raise FieldTypeError(field, entries)
        seen = set()
        for entry in entries:
            if not isinstance(entry, str):
                raise invalid(f"{noun} must be a string", field, entry)
            if entry in seen:
                raise duplicate(f"duplicate {noun} '{entry}'", field, entry)
            if not entry.strip():
                raise invalid(f"{noun} must not be solely whitespace", field, entry)
            seen.add(entry)
        return frozenset(seen)

    def _check_initial_state(self, initial_state: Any, states: FrozenSet[str]) -> str:
        if not isinstance(initial_state, str):
            raise InvalidInitialStateError(
                "initialState must be a string", "initialState", initial_state
            )
        if initial_state not in states:
            raise InvalidInitialStateError(
                "initialState is not a declared state", "initialState", initial_state
            )
        if not initial_state.strip():
            raise InvalidInitialStateError(
                "initialState must not be solely whitespace", "initialState", initial_state
            )
        return initial_state

    def _collect_final_states(self, entries, states: FrozenSet[str]) -> FrozenSet[str]:
        if not is_sequence(entries):
            raise FieldTypeError("finalStates", entries)
        seen = set()
        for entry in entries:
            if not isinstance(entry, str):
                raise InvalidFinalStateError(
                    "final state must be a string", "finalStates", entry
                )
            if entry in seen:
                raise DuplicateFinalStateError(
                    f"duplicate final state '{entry}'", "finalStates", entry
                )
            if entry not in states:
                raise UnknownFinalStateError(
                    f"final state '{entry}' is not a declared state", "finalStates", entry
                )
            seen.add(entry)
        return frozenset(seen)


_default_validator = SpecValidator()


def validate_spec(raw: Any) -> ValidatedSpec:
    """Module-level shortcut for SpecValidator().validate(raw)."""
    return _default_validator.validate(raw)
