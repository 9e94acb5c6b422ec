from pydantic import BaseModel, ConfigDict, Field
from typing import Any, FrozenSet, Mapping, NamedTuple, Union

from .errors import FieldTypeError, MissingFieldError


class AutomatonSpec(BaseModel):
    """
    Raw automaton description as supplied by a loader, a request body or a
    literal. Fields are untyped; shape defects are reported by the validator
    with a classified SpecValidationError.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    alphabet: Any = Field(default=None, description="Input symbols")
    states: Any = Field(default=None, description="State identifiers")
    initial_state: Any = Field(default=None, alias="initialState")
    final_states: Any = Field(default=None, alias="finalStates")
    transitions: Any = Field(default=None, description="(from, to, symbol) triples")

    @classmethod
    def coerce(cls, raw: Any) -> "AutomatonSpec":
        """Accepts an AutomatonSpec or a mapping using the wire keys."""
        if raw is None:
            raise MissingFieldError("spec")
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, Mapping):
            return cls.model_validate(dict(raw))
        raise FieldTypeError("spec", raw, expected="a mapping")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class ValidatedSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    alphabet: FrozenSet[str]
    states: FrozenSet[str]
    final_states: FrozenSet[str]
    initial_state: str


class Transition(NamedTuple):
    source: str
    target: str
    symbol: str


# --- DFA runtime state ---

class Active(BaseModel):
    """The DFA is in a declared state."""
    model_config = ConfigDict(frozen=True)

    state: str


class ErrorState(BaseModel):
    """Absorbing error configuration. Never a member of the declared states."""
    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "ERROR"

    def __str__(self) -> str:
        return "ERROR"


ERROR = ErrorState()

RuntimeState = Union[Active, ErrorState]
