from typing import Any, Dict, FrozenSet, Iterable, Mapping

from .errors import UnknownSymbolError
from .models import AutomatonSpec
from .transitions import TransitionTableBuilder
from .validator import validate_spec


class Automaton:
    """
    Shared construction and query surface for DFA and NFA.

    Construction validates the spec and builds the transition table before
    any attribute is assigned, so a failing spec never yields an instance.
    Only transition() mutates the runtime state.
    """

    kind = "abstract"
    table_builder: TransitionTableBuilder = None

    def __init__(self, spec: Any):
        raw = AutomatonSpec.coerce(spec)
        validated = validate_spec(raw)
        table = self.table_builder.build(validated, raw.transitions)

        self._spec = validated
        self._table = table
        self._reset_runtime()

    # --- Immutable description ---

    @property
    def alphabet(self) -> FrozenSet[str]:
        return self._spec.alphabet

    @property
    def states(self) -> FrozenSet[str]:
        return self._spec.states

    @property
    def final_states(self) -> FrozenSet[str]:
        return self._spec.final_states

    @property
    def initial_state(self) -> str:
        return self._spec.initial_state

    @property
    def transitions(self) -> Mapping[str, Mapping[str, Any]]:
        return self._table

    # --- Runtime ---

    def transition(self, symbol: str) -> None:
        raise NotImplementedError

    def is_accepting_state(self) -> bool:
        raise NotImplementedError

    def is_error_state(self) -> bool:
        raise NotImplementedError

    def _reset_runtime(self) -> None:
        raise NotImplementedError

    def _current_for_display(self) -> Any:
        raise NotImplementedError

    def _check_symbol(self, symbol: Any) -> None:
        # Unhashable symbols can never be in the alphabet.
        try:
            known = symbol in self._spec.alphabet
        except TypeError:
            known = False
        if not known:
            raise UnknownSymbolError(symbol)

    def feed(self, symbols: Iterable[str]) -> bool:
        """
        Feeds every symbol in order and returns whether the automaton accepts
        afterwards. A plain string is fed one character at a time.
        """
        for symbol in symbols:
            self.transition(symbol)
        return self.is_accepting_state()

    def snapshot(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "current": self._current_for_display(),
            "accepting": self.is_accepting_state(),
            "error": self.is_error_state(),
        }

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} states={len(self.states)} "
            f"alphabet={len(self.alphabet)} current={self._current_for_display()!r}>"
        )
