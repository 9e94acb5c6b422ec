from typing import Optional, Union

import structlog

from .automaton import Automaton
from .models import ERROR, Active, ErrorState, RuntimeState
from .transitions import DeterministicTableBuilder

log = structlog.get_logger()


class DFA(Automaton):
    """
    Deterministic finite automaton.

    The runtime state is either Active(state) or ERROR. ERROR is entered when
    a valid symbol has no transition from the current state and is absorbing:
    later valid symbols leave it unchanged. Symbols outside the alphabet
    always raise UnknownSymbolError, even in ERROR.
    """

    kind = "dfa"
    table_builder = DeterministicTableBuilder()

    def __init__(self, spec):
        super().__init__(spec)
        log.debug(
            "dfa_constructed",
            states=len(self.states),
            alphabet=len(self.alphabet),
            initial_state=self.initial_state,
        )

    def _reset_runtime(self) -> None:
        self._current: RuntimeState = Active(state=self._spec.initial_state)

    @property
    def runtime_state(self) -> RuntimeState:
        return self._current

    def get_current_state(self) -> Union[str, ErrorState]:
        """Returns the current state identifier, or ERROR."""
        if isinstance(self._current, ErrorState):
            return ERROR
        return self._current.state

    def is_accepting_state(self) -> bool:
        return isinstance(self._current, Active) and self._current.state in self._spec.final_states

    def is_error_state(self) -> bool:
        return isinstance(self._current, ErrorState)

    def transition(self, symbol: str) -> None:
        self._check_symbol(symbol)

        if isinstance(self._current, ErrorState):
            return

        target: Optional[str] = self._table.get(self._current.state, {}).get(symbol)
        if target is None:
            log.debug("dfa_entered_error_state", state=self._current.state, symbol=symbol)
            self._current = ERROR
        else:
            self._current = Active(state=target)

    def _current_for_display(self) -> Optional[str]:
        # None cannot collide with a declared state name
        if isinstance(self._current, ErrorState):
            return None
        return self._current.state
