from __future__ import annotations

from typing import Iterable, Set

from automaton.model import AutomatonModel


def accepts(model: AutomatonModel, word: Iterable[str]) -> bool:
    # 状态集合模拟，对 NFA 和 DFA 都成立；字母表外的符号直接拒绝
    if model.start is None:
        return False
    current: Set[str] = {model.start}
    for symbol in word:
        if symbol not in model.alphabet:
            return False
        nxt: Set[str] = set()
        for state in current:
            nxt |= model.targets(state, symbol)
        if not nxt:
            return False
        current = nxt
    return bool(current & model.final)
