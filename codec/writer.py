from __future__ import annotations

from typing import List

from automaton.model import AutomatonModel


def serialize(model: AutomatonModel) -> str:
    # 固定段顺序，各段排序输出，便于 diff
    alphabet = sorted(model.alphabet)
    states = sorted(model.states)

    lines: List[str] = ["ALPHABET"]
    lines.extend(alphabet)
    lines.append("STATES")
    lines.extend(states)
    lines.append("START")
    if model.start:
        lines.append(model.start)
    lines.append("FINAL")
    lines.extend(sorted(model.final))
    lines.append("TRANSITIONS")
    for state in states:
        for symbol in alphabet:
            for target in sorted(model.targets(state, symbol)):
                lines.append(f"{state} {symbol} {target}")
    lines.append("END")
    return "\n".join(lines) + "\n"
