import copy

import pytest

from automaton.errors import ValidationError
from automaton.model import AutomatonKind, AutomatonModel
from automaton.validation import validate


def test_valid_nfa_passes(ab_nfa):
    validate(ab_nfa)
    ab_nfa.validate(AutomatonKind.NFA)


def test_missing_start(model_factory):
    model = model_factory(["a"], ["q0"], None, [], [])
    with pytest.raises(ValidationError, match="No start state"):
        validate(model)


def test_start_not_in_states(model_factory):
    model = model_factory(["a"], ["q0"], "q9", [], [])
    with pytest.raises(ValidationError) as exc:
        validate(model)
    assert str(exc.value) == "Start state q9 is not in states"
    assert exc.value.state == "q9"


def test_final_not_in_states(model_factory):
    model = model_factory(["a"], ["q0"], "q0", ["q0", "qx"], [])
    with pytest.raises(ValidationError, match="Final state qx is not in states"):
        validate(model)


def test_transition_source_not_in_states(model_factory):
    model = model_factory(["a"], ["q0"], "q0", [], [("qx", "a", "q0")])
    with pytest.raises(ValidationError, match="Transition state qx is not in states"):
        validate(model)


def test_transition_symbol_not_in_alphabet(model_factory):
    model = model_factory(["a"], ["q0"], "q0", [], [("q0", "z", "q0")])
    with pytest.raises(ValidationError) as exc:
        validate(model)
    assert str(exc.value) == "Transition symbol z is not in alphabet"
    assert exc.value.symbol == "z"


def test_transition_target_not_in_states(model_factory):
    model = model_factory(["a"], ["q0"], "q0", [], [("q0", "a", "qx")])
    with pytest.raises(ValidationError, match="Transition target state qx is not in states"):
        validate(model)


def test_start_checked_before_final(model_factory):
    model = model_factory(["a"], ["q0"], "qs", ["qf"], [])
    with pytest.raises(ValidationError, match="Start state qs"):
        validate(model)


def test_nfa_allows_missing_and_ambiguous_transitions(ab_nfa):
    # 对 NFA 合法，对 DFA 不合法
    validate(ab_nfa, AutomatonKind.NFA)
    with pytest.raises(ValidationError):
        validate(ab_nfa, AutomatonKind.DFA)


def test_dfa_missing_transition_names_state_and_symbol(model_factory):
    model = model_factory(["a", "b"], ["q0"], "q0", [], [("q0", "a", "q0")])
    with pytest.raises(ValidationError) as exc:
        validate(model, AutomatonKind.DFA)
    assert str(exc.value) == "State q0 has no transition for symbol b"
    assert (exc.value.state, exc.value.symbol) == ("q0", "b")


def test_dfa_ambiguous_transition(model_factory):
    model = model_factory(
        ["a"], ["q0", "q1"], "q0", [], [("q0", "a", "q0"), ("q0", "a", "q1"), ("q1", "a", "q1")]
    )
    with pytest.raises(ValidationError, match="State q0 has more than one transition for symbol a"):
        validate(model, AutomatonKind.DFA)


def test_total_dfa_passes(parity_dfa):
    validate(parity_dfa, AutomatonKind.DFA)


def test_unreachable_final_state_is_allowed(model_factory):
    model = model_factory(["a"], ["q0", "q1"], "q0", ["q1"], [("q0", "a", "q0")])
    validate(model)


def test_validation_does_not_mutate(ab_nfa):
    before = copy.deepcopy(ab_nfa)
    validate(ab_nfa)
    with pytest.raises(ValidationError):
        validate(ab_nfa, AutomatonKind.DFA)
    assert ab_nfa == before


def test_targets_does_not_create_entries():
    model = AutomatonModel(alphabet={"a"}, states={"q0"}, start="q0")
    assert model.targets("q0", "a") == frozenset()
    assert model.transitions == {}
