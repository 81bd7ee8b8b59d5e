from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, FrozenSet, List, Optional, Set

from automaton.model import AutomatonKind, AutomatonModel
from automaton.validation import validate
from dfa.subset_name import canonical_name
from utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SINK_NAME = "SINK"


@dataclass
class NFAToDFAConverter:
    """子集构造：广度优先遍历可达的 NFA 状态子集。

    输入须已通过 NFA 校验；输出在返回前做 DFA 校验。
    没有后继的 (state, symbol) 统一转到陷阱状态，保证 DFA 是全函数。
    DFA 状态名在本次转换内唯一：与已分配的名字冲突时追加 "_"。
    """

    nfa: AutomatonModel
    sink_name: str = DEFAULT_SINK_NAME

    def __post_init__(self) -> None:
        self._alphabet: List[str] = sorted(self.nfa.alphabet)
        self._state_map: Dict[FrozenSet[str], str] = {}
        self._used_names: Set[str] = set()
        self._sink: Optional[str] = None

    def _unique_name(self, name: str) -> str:
        # 状态名本身可能含 "{", ",", "}"，或与陷阱状态同名，冲突时追加 "_"
        resolved = name
        while resolved in self._used_names:
            resolved += "_"
        if resolved != name:
            logger.warning("state name %r already taken, using %r", name, resolved)
        self._used_names.add(resolved)
        return resolved

    def _name_for(self, subset: FrozenSet[str]) -> str:
        name = self._state_map.get(subset)
        if name is None:
            name = self._unique_name(canonical_name(subset))
            self._state_map[subset] = name
        return name

    def _move(self, subset: FrozenSet[str], symbol: str) -> FrozenSet[str]:
        result: Set[str] = set()
        for state in subset:
            result |= self.nfa.targets(state, symbol)
        return frozenset(result)

    def _contains_accepting_state(self, subset: FrozenSet[str]) -> bool:
        return not self.nfa.final.isdisjoint(subset)

    def _ensure_sink(self, dfa: AutomatonModel) -> str:
        if self._sink is None:
            self._sink = self._unique_name(self.sink_name)
            dfa.states.add(self._sink)
            for symbol in self._alphabet:
                dfa.add_transition(self._sink, symbol, self._sink)
            logger.debug("created sink state %s", self._sink)
        return self._sink

    def convert_to_dfa(self) -> AutomatonModel:
        self._state_map = {}
        self._used_names = set()
        self._sink = None
        dfa = AutomatonModel(alphabet=set(self.nfa.alphabet))

        start_subset = frozenset({self.nfa.start})
        dfa.start = self._name_for(start_subset)

        # 子集按内容去重；_state_map 同时充当 visited
        unprocessed: Deque[FrozenSet[str]] = deque([start_subset])

        while unprocessed:
            current = unprocessed.popleft()
            current_name = self._state_map[current]
            dfa.states.add(current_name)
            if self._contains_accepting_state(current):
                dfa.final.add(current_name)
            logger.debug("processing %s", current_name)

            for symbol in self._alphabet:
                moved = self._move(current, symbol)
                if not moved:
                    dfa.add_transition(current_name, symbol, self._ensure_sink(dfa))
                    continue

                if moved not in self._state_map:
                    unprocessed.append(moved)
                dfa.add_transition(current_name, symbol, self._name_for(moved))

        logger.info(
            "converted NFA with %d states into DFA with %d states%s",
            len(self.nfa.states),
            len(dfa.states),
            " (sink added)" if self._sink is not None else "",
        )
        validate(dfa, AutomatonKind.DFA)
        return dfa


def convert(nfa: AutomatonModel, sink_name: Optional[str] = None) -> AutomatonModel:
    return NFAToDFAConverter(nfa, sink_name or DEFAULT_SINK_NAME).convert_to_dfa()
