"""
Transition table construction.

Both builders share the tuple shape and membership checks in
TransitionTableBuilder.build and differ only in how a second transition for
an existing (source, symbol) pair is handled: the deterministic builder
rejects it, the nondeterministic builder adds the target to a set.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Generic, Iterable, Mapping, Set, TypeVar

import structlog

from .errors import (
    FieldTypeError,
    NonDeterministicTransitionError,
    TransitionArityError,
    TransitionTypeError,
    UnknownTransitionStateError,
    UnknownTransitionSymbolError,
)
from .models import Transition, ValidatedSpec

log = structlog.get_logger()

T = TypeVar("T")

_POSITIONS = ("source", "target", "symbol")


class TransitionTableBuilder(Generic[T]):
    kind = "abstract"

    def build(self, spec: ValidatedSpec, transitions: Iterable[Any]) -> Mapping[str, Mapping[str, T]]:
        if not isinstance(transitions, (list, tuple)):
            raise FieldTypeError("transitions", transitions)

        table: Dict[str, Dict[str, Any]] = {}
        for raw in transitions:
            transition = self._check_shape(raw)
            self._check_membership(spec, transition, raw)
            self._add(table.setdefault(transition.source, {}), transition, raw)

        frozen = self._freeze(table)
        log.debug(
            "transition_table_built",
            kind=self.kind,
            sources=len(frozen),
            pairs=sum(len(row) for row in frozen.values()),
        )
        return frozen

    def _check_shape(self, raw: Any) -> Transition:
        if not isinstance(raw, (list, tuple)) or len(raw) != 3:
            raise TransitionArityError(
                "transition must be a 3-tuple of strings", "transitions", raw
            )
        for index, element in enumerate(raw):
            if not isinstance(element, str):
                raise TransitionTypeError(
                    f"transition must be a 3-tuple of strings, element {index} "
                    f"({_POSITIONS[index]}) is {element!r} of type {type(element).__name__}",
                    "transitions",
                    raw,
                )
        return Transition(*raw)

    def _check_membership(self, spec: ValidatedSpec, transition: Transition, raw: Any) -> None:
        if transition.source not in spec.states:
            raise UnknownTransitionStateError(
                f"source state '{transition.source}' of transition is not a declared state",
                "transitions",
                raw,
            )
        if transition.target not in spec.states:
            raise UnknownTransitionStateError(
                f"target state '{transition.target}' of transition is not a declared state",
                "transitions",
                raw,
            )
        if transition.symbol not in spec.alphabet:
            raise UnknownTransitionSymbolError(
                f"symbol '{transition.symbol}' of transition is not in the alphabet",
                "transitions",
                raw,
            )

    def _add(self, row: Dict[str, Any], transition: Transition, raw: Any) -> None:
        raise NotImplementedError

    def _freeze(self, table: Dict[str, Dict[str, Any]]) -> Mapping[str, Mapping[str, T]]:
        return MappingProxyType(
            {source: MappingProxyType(dict(row)) for source, row in table.items()}
        )


class DeterministicTableBuilder(TransitionTableBuilder[str]):
    kind = "dfa"

    def _add(self, row: Dict[str, str], transition: Transition, raw: Any) -> None:
        if transition.symbol in row:
            raise NonDeterministicTransitionError(transition.source, transition.symbol, raw)
        row[transition.symbol] = transition.target


class NondeterministicTableBuilder(TransitionTableBuilder[FrozenSet[str]]):
    kind = "nfa"

    def _add(self, row: Dict[str, Set[str]], transition: Transition, raw: Any) -> None:
        row.setdefault(transition.symbol, set()).add(transition.target)

    def _freeze(self, table):
        return MappingProxyType({
            source: MappingProxyType({symbol: frozenset(targets) for symbol, targets in row.items()})
            for source, row in table.items()
        })
