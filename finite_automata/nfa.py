from typing import FrozenSet

import structlog

from .automaton import Automaton
from .transitions import NondeterministicTableBuilder

log = structlog.get_logger()

_NOTHING: FrozenSet[str] = frozenset()


class NFA(Automaton):
    """
    Nondeterministic finite automaton without epsilon transitions.

    The runtime state is the set of active states. An empty set is the dead
    configuration: it is the error state and stays empty for every later
    valid symbol.

    Acceptance: the NFA accepts when at least one active state is final. The
    empty set never accepts.
    """

    kind = "nfa"
    table_builder = NondeterministicTableBuilder()

    def __init__(self, spec):
        super().__init__(spec)
        log.debug(
            "nfa_constructed",
            states=len(self.states),
            alphabet=len(self.alphabet),
            initial_state=self.initial_state,
        )

    def _reset_runtime(self) -> None:
        self._active: FrozenSet[str] = frozenset([self._spec.initial_state])

    def get_current_states(self) -> FrozenSet[str]:
        return self._active

    def is_error_state(self) -> bool:
        return not self._active

    def is_accepting_state(self) -> bool:
        return not self._active.isdisjoint(self._spec.final_states)

    def transition(self, symbol: str) -> None:
        self._check_symbol(symbol)

        if not self._active:
            return

        reached = set()
        for state in self._active:
            reached.update(self._table.get(state, {}).get(symbol, _NOTHING))

        if not reached:
            log.debug("nfa_died", states=sorted(self._active), symbol=symbol)
        self._active = frozenset(reached)

    def _current_for_display(self):
        return sorted(self._active)
