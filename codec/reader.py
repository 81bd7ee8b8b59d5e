from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from automaton.errors import FormatError, ResourceError
from automaton.model import AutomatonModel
from utils.logging_config import get_logger

logger = get_logger(__name__)

SECTIONS = ("ALPHABET", "STATES", "START", "FINAL", "TRANSITIONS")
END = "END"


def parse_lines(lines: Iterable[str], strict_transitions: bool = False) -> AutomatonModel:
    """按段读取自动机描述，只做切分，不做校验。

    段头区分大小写；遇到 END 停止，之后的内容忽略；空行跳过。
    """
    model = AutomatonModel()
    section: Optional[str] = None
    start_line: Optional[int] = None

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line == END:
            break
        if line in SECTIONS:
            section = line
            continue

        if section is None:
            raise FormatError("Content before first section header", line=line_no, content=raw)
        if section == "ALPHABET":
            model.alphabet.add(line)
        elif section == "STATES":
            model.states.add(line)
        elif section == "START":
            if start_line is not None:
                raise FormatError(
                    f"Duplicate start state {line} (already {model.start} at line {start_line})",
                    line=line_no,
                    content=raw,
                )
            model.start = line
            start_line = line_no
        elif section == "FINAL":
            model.final.add(line)
        else:
            _parse_transition(model, line, line_no, strict_transitions)

    logger.debug("parsed %s", model)
    return model


def _parse_transition(model: AutomatonModel, line: str, line_no: int, strict: bool) -> None:
    tokens = line.split()
    if len(tokens) < 3:
        raise FormatError(
            f"Malformed transition '{line}': expected <state> <symbol> <next_state>",
            line=line_no,
            content=line,
        )
    if len(tokens) > 3:
        if strict:
            raise FormatError(
                f"Malformed transition '{line}': unexpected tokens {' '.join(tokens[3:])}",
                line=line_no,
                content=line,
            )
        logger.warning("line %d: ignoring extra tokens %s", line_no, tokens[3:])
    state, symbol, next_state = tokens[:3]
    model.add_transition(state, symbol, next_state)


def parse_text(text: str, strict_transitions: bool = False) -> AutomatonModel:
    return parse_lines(text.splitlines(), strict_transitions=strict_transitions)


def detect_file_encoding(path: Path) -> Optional[str]:
    with path.open("rb") as f:
        data = f.read(4)
    # utf-32-le 的 BOM 以 utf-16-le 的 BOM 开头，需先判断；utf-16/utf-32 解码时会吃掉 BOM
    if data[0:4] in (b"\xFF\xFE\x00\x00", b"\x00\x00\xFE\xFF"):
        return "utf-32"
    if data[0:3] == b"\xEF\xBB\xBF":
        return "utf-8-sig"
    if data[0:2] in (b"\xFE\xFF", b"\xFF\xFE"):
        return "utf-16"
    return None


def read_automaton(path: Union[str, Path], strict_transitions: bool = False) -> AutomatonModel:
    source = Path(path)
    try:
        encoding = detect_file_encoding(source) or "utf-8"
        with source.open("r", encoding=encoding) as f:
            lines = f.readlines()
    except FileNotFoundError as e:
        raise ResourceError(f"File not found: {path}", path=str(path)) from e
    except IsADirectoryError as e:
        raise ResourceError(f"Not a file: {path}", path=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(f"Cannot read file {path}: {e}", path=str(path)) from e

    logger.info("read %d lines from %s (%s)", len(lines), source, encoding)
    return parse_lines(lines, strict_transitions=strict_transitions)
