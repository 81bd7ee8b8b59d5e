"""
Pytest fixtures for the nfa2dfa tests.
"""

from pathlib import Path

import pytest

from automaton.model import AutomatonModel

DATA_DIR = Path(__file__).resolve().parent / "data"


def make_model(alphabet, states, start, final, transitions):
    model = AutomatonModel(alphabet=set(alphabet), states=set(states), start=start, final=set(final))
    for state, symbol, target in transitions:
        model.add_transition(state, symbol, target)
    return model


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def ab_nfa():
    """q0 --a--> {q0, q1}, q1 --b--> q1; accepts a+b*."""
    return make_model(
        alphabet=["a", "b"],
        states=["q0", "q1"],
        start="q0",
        final=["q1"],
        transitions=[("q0", "a", "q0"), ("q0", "a", "q1"), ("q1", "b", "q1")],
    )


@pytest.fixture
def ends_with_ab_nfa():
    """Strings over {a, b} ending in 'ab'."""
    return make_model(
        alphabet=["a", "b"],
        states=["s0", "s1", "s2"],
        start="s0",
        final=["s2"],
        transitions=[
            ("s0", "a", "s0"),
            ("s0", "b", "s0"),
            ("s0", "a", "s1"),
            ("s1", "b", "s2"),
        ],
    )


@pytest.fixture
def parity_dfa():
    """Total DFA accepting strings with an even number of 1s."""
    return make_model(
        alphabet=["0", "1"],
        states=["even", "odd"],
        start="even",
        final=["even"],
        transitions=[
            ("even", "0", "even"),
            ("even", "1", "odd"),
            ("odd", "0", "odd"),
            ("odd", "1", "even"),
        ],
    )


@pytest.fixture
def model_factory():
    return make_model
