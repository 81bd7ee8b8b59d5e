from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, Optional, Set, Tuple


class AutomatonKind(Enum):
    NFA = "NFA"
    DFA = "DFA"


@dataclass
class AutomatonModel:
    """有限自动机的统一数据结构，NFA 与 DFA 共用。

    - transitions[state][symbol] 是目标状态集合；缺少的键表示没有转移
    - DFA 与 NFA 的区别只体现在校验上（见 automaton.validation）
    - 由读取器或转换器一次性填充，校验之后视为只读
    """

    alphabet: Set[str] = field(default_factory=set)
    states: Set[str] = field(default_factory=set)
    start: Optional[str] = None
    final: Set[str] = field(default_factory=set)
    transitions: Dict[str, Dict[str, Set[str]]] = field(default_factory=dict)

    def add_transition(self, state: str, symbol: str, target: str) -> None:
        self.transitions.setdefault(state, {}).setdefault(symbol, set()).add(target)

    def targets(self, state: str, symbol: str) -> FrozenSet[str]:
        # 只读查询，不创建空条目
        return frozenset(self.transitions.get(state, {}).get(symbol, ()))

    def iter_transitions(self) -> Iterator[Tuple[str, str, str]]:
        for state in sorted(self.transitions):
            by_symbol = self.transitions[state]
            for symbol in sorted(by_symbol):
                for target in sorted(by_symbol[symbol]):
                    yield state, symbol, target

    def validate(self, kind: AutomatonKind = AutomatonKind.NFA) -> None:
        from automaton.validation import validate

        validate(self, kind)

    def __str__(self) -> str:
        return (
            f"Automaton(states={len(self.states)}, alphabet={len(self.alphabet)}, "
            f"start={self.start}, final={len(self.final)})"
        )
