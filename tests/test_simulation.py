from automaton.model import AutomatonModel
from automaton.simulation import accepts


def test_nfa_branches(ends_with_ab_nfa):
    assert accepts(ends_with_ab_nfa, "ab")
    assert accepts(ends_with_ab_nfa, "babab")
    assert not accepts(ends_with_ab_nfa, "aba")
    assert not accepts(ends_with_ab_nfa, "")


def test_stuck_run_rejects(ab_nfa):
    assert accepts(ab_nfa, "aabb")
    assert not accepts(ab_nfa, "aba")
    assert not accepts(ab_nfa, "b")


def test_unknown_symbol_rejects(parity_dfa):
    assert accepts(parity_dfa, "0110")
    assert not accepts(parity_dfa, "01x0")


def test_multi_character_symbols(model_factory):
    model = model_factory(["go", "stop"], ["idle", "run"], "idle", ["idle"], [
        ("idle", "go", "run"),
        ("run", "stop", "idle"),
    ])
    assert accepts(model, ["go", "stop"])
    assert not accepts(model, ["go"])


def test_no_start_rejects():
    assert not accepts(AutomatonModel(alphabet={"a"}, states={"q"}, final={"q"}), "")
