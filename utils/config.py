from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


@dataclass(frozen=True)
class Settings:
    """运行配置，可由环境变量覆盖。"""

    # 补全转移时使用的陷阱状态名
    sink_name: str = "SINK"
    # 转移行多于 3 个 token 时是否报错（默认宽松：忽略多余 token）
    strict_transitions: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.sink_name:
            raise ValueError("sink_name must not be empty")
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        object.__setattr__(self, "log_level", level)

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        strict = env.get("NFA2DFA_STRICT_TRANSITIONS", "").strip().lower() in _TRUE_VALUES
        return Settings(
            sink_name=env.get("NFA2DFA_SINK_NAME", "SINK").strip() or "SINK",
            strict_transitions=strict,
            log_level=env.get("NFA2DFA_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
            log_file=env.get("NFA2DFA_LOG_FILE") or None,
        )
