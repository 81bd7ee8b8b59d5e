from __future__ import annotations

from automaton.errors import ValidationError
from automaton.model import AutomatonKind, AutomatonModel
from utils.logging_config import get_logger

logger = get_logger(__name__)


def validate(model: AutomatonModel, kind: AutomatonKind = AutomatonKind.NFA) -> None:
    """检查自动机的结构不变式，遇到第一个违例即抛出 ValidationError。

    检查顺序：起始状态存在 -> 起始状态属于 states -> 终止状态属于 states
    -> 转移的源/符号/目标合法 -> （仅 DFA）每个 (state, symbol) 恰好一个目标。
    不修改 model。
    """
    logger.debug(
        "validating %s: %d states, %d symbols, %d final",
        kind.value,
        len(model.states),
        len(model.alphabet),
        len(model.final),
    )

    if not model.start:
        raise ValidationError("No start state")
    if model.start not in model.states:
        raise ValidationError(f"Start state {model.start} is not in states", state=model.start)

    for state in sorted(model.final):
        if state not in model.states:
            raise ValidationError(f"Final state {state} is not in states", state=state)

    for state in sorted(model.transitions):
        if state not in model.states:
            raise ValidationError(f"Transition state {state} is not in states", state=state)
        by_symbol = model.transitions[state]
        for symbol in sorted(by_symbol):
            if symbol not in model.alphabet:
                raise ValidationError(
                    f"Transition symbol {symbol} is not in alphabet", state=state, symbol=symbol
                )
            for target in sorted(by_symbol[symbol]):
                if target not in model.states:
                    raise ValidationError(
                        f"Transition target state {target} is not in states", state=target, symbol=symbol
                    )

    if kind is AutomatonKind.DFA:
        _validate_deterministic(model)


def _validate_deterministic(model: AutomatonModel) -> None:
    # 全函数且单值
    for state in sorted(model.states):
        for symbol in sorted(model.alphabet):
            count = len(model.targets(state, symbol))
            if count == 0:
                raise ValidationError(
                    f"State {state} has no transition for symbol {symbol}", state=state, symbol=symbol
                )
            if count > 1:
                raise ValidationError(
                    f"State {state} has more than one transition for symbol {symbol}",
                    state=state,
                    symbol=symbol,
                )
