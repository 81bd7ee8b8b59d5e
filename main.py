from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, TextIO

_THIS_DIR = Path(__file__).resolve().parent
if str(_THIS_DIR) not in sys.path:
    sys.path.insert(0, str(_THIS_DIR))

from automaton.errors import AutomatonError
from automaton.model import AutomatonKind
from automaton.validation import validate
from codec.reader import read_automaton
from codec.writer import serialize
from dfa.nfa_to_dfa_converter import NFAToDFAConverter
from utils.config import Settings
from utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def program_name(argv: List[str]) -> str:
    if not argv:
        return "nfa2dfa"
    return Path(argv[0]).name or "nfa2dfa"


def run(file_path: str, settings: Settings) -> str:
    # 读取 -> NFA 校验 -> 子集构造（内部做 DFA 校验）-> 序列化
    nfa = read_automaton(file_path, strict_transitions=settings.strict_transitions)
    validate(nfa, AutomatonKind.NFA)
    dfa = NFAToDFAConverter(nfa, sink_name=settings.sink_name).convert_to_dfa()
    return serialize(dfa)


def main(
    argv: List[str],
    settings: Optional[Settings] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    if len(argv) != 2:
        print(f"Usage: ./{program_name(argv)} <input_file>", file=err)
        return 1

    try:
        if settings is None:
            settings = Settings.from_env()
        setup_logging(settings.log_level, settings.log_file)
    except (ValueError, OSError) as e:
        # 配置错误与用法错误一样：单行写到 stderr，返回 1
        print(f"Configuration error: {e}", file=err)
        return 1

    try:
        print(run(argv[1], settings), end="", file=out)
    except AutomatonError as e:
        logger.info("conversion of %s failed: %r", argv[1], e)
        print(e, file=out)
    return 0


def cli() -> int:
    return main(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
