"""
finite_automata: build and simulate DFAs and NFAs from declarative specs.
Centralized exports for the core.
"""

__version__ = "1.0.0"

from .errors import (
    AutomatonError,
    SpecValidationError,
    MissingFieldError,
    FieldTypeError,
    InvalidAlphabetSymbolError,
    DuplicateAlphabetSymbolError,
    InvalidStateError,
    DuplicateStateError,
    InvalidInitialStateError,
    InvalidFinalStateError,
    DuplicateFinalStateError,
    UnknownFinalStateError,
    TransitionArityError,
    TransitionTypeError,
    UnknownTransitionStateError,
    UnknownTransitionSymbolError,
    NonDeterministicTransitionError,
    UnknownSymbolError,
    SpecLoadError,
)

from .models import (
    AutomatonSpec,
    ValidatedSpec,
    Transition,
    Active,
    ErrorState,
    ERROR,
)

from .validator import SpecValidator, validate_spec
from .transitions import DeterministicTableBuilder, NondeterministicTableBuilder
from .automaton import Automaton
from .dfa import DFA
from .nfa import NFA
from .factory import build_automaton, accepts
from .loader import load_spec

__all__ = [
    "__version__",
    # Errors
    "AutomatonError",
    "SpecValidationError",
    "MissingFieldError",
    "FieldTypeError",
    "InvalidAlphabetSymbolError",
    "DuplicateAlphabetSymbolError",
    "InvalidStateError",
    "DuplicateStateError",
    "InvalidInitialStateError",
    "InvalidFinalStateError",
    "DuplicateFinalStateError",
    "UnknownFinalStateError",
    "TransitionArityError",
    "TransitionTypeError",
    "UnknownTransitionStateError",
    "UnknownTransitionSymbolError",
    "NonDeterministicTransitionError",
    "UnknownSymbolError",
    "SpecLoadError",
    # Models
    "AutomatonSpec",
    "ValidatedSpec",
    "Transition",
    "Active",
    "ErrorState",
    "ERROR",
    # Construction
    "SpecValidator",
    "validate_spec",
    "DeterministicTableBuilder",
    "NondeterministicTableBuilder",
    # Engines
    "Automaton",
    "DFA",
    "NFA",
    "build_automaton",
    "accepts",
    # Loading
    "load_spec",
]
