import pytest

from finite_automata import NFA
from finite_automata.errors import UnknownSymbolError


def test_starts_with_singleton(branching_spec):
    nfa = NFA(branching_spec)
    assert nfa.get_current_states() == frozenset({"s1"})
    assert nfa.is_error_state() is False
    assert nfa.kind == "nfa"


def test_branching_transition(branching_spec):
    nfa = NFA(branching_spec)
    nfa.transition("a")
    assert nfa.get_current_states() == frozenset({"s2", "s3"})


def test_dfa_conflicting_spec_is_legal_for_nfa(branching_spec):
    nfa = NFA(branching_spec)
    assert nfa.transitions["s1"]["a"] == frozenset({"s2", "s3"})


def test_missing_transition_kills(branching_spec):
    nfa = NFA(branching_spec)
    nfa.transition("b")
    assert nfa.get_current_states() == frozenset()
    assert nfa.is_error_state() is True


def test_dead_configuration_is_absorbing(branching_spec):
    nfa = NFA(branching_spec)
    nfa.transition("b")
    for symbol in "abab":
        nfa.transition(symbol)
        assert nfa.get_current_states() == frozenset()
        assert nfa.is_error_state() is True


def test_partial_contributions_do_not_kill(ends_with_ab_spec):
    nfa = NFA(ends_with_ab_spec)
    nfa.transition("a")
    assert nfa.get_current_states() == frozenset({"q0", "q1"})
    nfa.transition("b")
    # q1 -b-> q2, q0 -b-> q0
    assert nfa.get_current_states() == frozenset({"q0", "q2"})
    nfa.transition("b")
    # q2 has no transitions but q0 survives
    assert nfa.get_current_states() == frozenset({"q0"})
    assert nfa.is_error_state() is False


def test_active_set_has_no_duplicates():
    nfa = NFA({
        "alphabet": ["x"],
        "states": ["p", "q"],
        "initialState": "p",
        "finalStates": [],
        "transitions": [["p", "q", "x"], ["p", "p", "x"], ["q", "q", "x"], ["q", "p", "x"], ["p", "q", "x"]],
    })
    for _ in range(50):
        nfa.transition("x")
    assert nfa.get_current_states() == frozenset({"p", "q"})
    assert len(nfa.get_current_states()) == 2


# --- Acceptance: at least one active state is final ---
def test_mixed_active_set_accepts(branching_spec):
    nfa = NFA(branching_spec)
    nfa.transition("a")
    assert nfa.get_current_states() == frozenset({"s2", "s3"})
    assert nfa.is_accepting_state() is True


def test_no_final_state_active_rejects(branching_spec):
    branching_spec["finalStates"] = ["s1"]
    nfa = NFA(branching_spec)
    assert nfa.is_accepting_state() is True
    nfa.transition("a")
    assert nfa.is_accepting_state() is False


def test_empty_active_set_never_accepts(branching_spec):
    branching_spec["finalStates"] = ["s1", "s2", "s3"]
    nfa = NFA(branching_spec)
    nfa.transition("b")
    assert nfa.get_current_states() == frozenset()
    assert nfa.is_accepting_state() is False


@pytest.mark.parametrize("word,accepted", [
    ("ab", True),
    ("aab", True),
    ("bab", True),
    ("abb", False),
    ("a", False),
    ("", False),
])
def test_ends_with_ab(ends_with_ab_spec, word, accepted):
    assert NFA(ends_with_ab_spec).feed(word) is accepted


# --- Unknown symbols ---
def test_unknown_symbol_raises(branching_spec):
    nfa = NFA(branching_spec)
    with pytest.raises(UnknownSymbolError):
        nfa.transition("c")
    assert nfa.get_current_states() == frozenset({"s1"})


def test_unknown_symbol_raises_when_dead(branching_spec):
    nfa = NFA(branching_spec)
    nfa.transition("b")
    with pytest.raises(UnknownSymbolError):
        nfa.transition("c")


# --- Independence ---
def test_instances_are_independent(branching_spec):
    first = NFA(branching_spec)
    second = NFA(branching_spec)
    first.transition("a")
    assert second.get_current_states() == frozenset({"s1"})


def test_returned_set_cannot_mutate_runtime(branching_spec):
    nfa = NFA(branching_spec)
    states = nfa.get_current_states()
    with pytest.raises(AttributeError):
        states.add("s2")


def test_snapshot_lists_sorted_states(branching_spec):
    nfa = NFA(branching_spec)
    nfa.transition("a")
    assert nfa.snapshot() == {"kind": "nfa", "current": ["s2", "s3"], "accepting": True, "error": False}
