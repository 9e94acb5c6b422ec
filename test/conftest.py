import copy
import logging
import os
import sys

import pytest

# Make the package importable when the tests run from a source checkout
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


# alphabet {a, b}: s1 -a-> s2 -b-> s3, s3 final
LINEAR_SPEC = {
    "alphabet": ["a", "b"],
    "states": ["s1", "s2", "s3"],
    "initialState": "s1",
    "finalStates": ["s3"],
    "transitions": [
        ["s1", "s2", "a"],
        ["s2", "s3", "b"],
    ],
}

# binary strings with an even number of 0s (same shape as the sample dfa.json)
EVEN_ZEROS_SPEC = {
    "alphabet": ["0", "1"],
    "states": ["even", "odd"],
    "initialState": "even",
    "finalStates": ["even"],
    "transitions": [
        ["even", "odd", "0"],
        ["odd", "even", "0"],
        ["even", "even", "1"],
        ["odd", "odd", "1"],
    ],
}

# s1 -a-> {s2, s3}
BRANCHING_SPEC = {
    "alphabet": ["a", "b"],
    "states": ["s1", "s2", "s3"],
    "initialState": "s1",
    "finalStates": ["s3"],
    "transitions": [
        ["s1", "s2", "a"],
        ["s1", "s3", "a"],
    ],
}

# words over {a, b} ending in "ab"
ENDS_WITH_AB_SPEC = {
    "alphabet": ["a", "b"],
    "states": ["q0", "q1", "q2"],
    "initialState": "q0",
    "finalStates": ["q2"],
    "transitions": [
        ["q0", "q0", "a"],
        ["q0", "q0", "b"],
        ["q0", "q1", "a"],
        ["q1", "q2", "b"],
    ],
}


@pytest.fixture
def linear_spec():
    return copy.deepcopy(LINEAR_SPEC)


@pytest.fixture
def even_zeros_spec():
    return copy.deepcopy(EVEN_ZEROS_SPEC)


@pytest.fixture
def branching_spec():
    return copy.deepcopy(BRANCHING_SPEC)


@pytest.fixture
def ends_with_ab_spec():
    return copy.deepcopy(ENDS_WITH_AB_SPEC)


@pytest.fixture(autouse=True)
def _reset_root_handlers():
    # setup_logging() binds handlers to the streams captured by the current test
    yield
    logging.getLogger().handlers.clear()
