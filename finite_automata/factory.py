from typing import Any, Dict, Iterable, Type

from .automaton import Automaton
from .dfa import DFA
from .nfa import NFA

AUTOMATON_KINDS: Dict[str, Type[Automaton]] = {
    DFA.kind: DFA,
    NFA.kind: NFA,
}


def build_automaton(spec: Any, kind: str = "dfa") -> Automaton:
    """Builds a DFA or NFA from a raw spec. kind is 'dfa' or 'nfa'."""
    try:
        cls = AUTOMATON_KINDS[kind.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown automaton kind: {kind!r} (expected one of {sorted(AUTOMATON_KINDS)})")
    return cls(spec)


def accepts(spec: Any, symbols: Iterable[str], kind: str = "dfa") -> bool:
    """Builds a fresh automaton from spec and reports whether it accepts symbols."""
    return build_automaton(spec, kind).feed(symbols)
