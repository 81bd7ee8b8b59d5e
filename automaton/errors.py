from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class AutomatonError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ResourceError(AutomatonError):
    # 无法打开/读取的输入路径
    path: Optional[str] = None


@dataclass
class FormatError(AutomatonError):
    # 出错的行号（从 1 开始），未知时为 None
    line: Optional[int] = None
    # 出错行的原始内容
    content: Optional[str] = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"Line {self.line}: {self.message}"


@dataclass
class ValidationError(AutomatonError):
    # 违反不变式的状态/符号（如果有）
    state: Optional[str] = None
    symbol: Optional[str] = None
