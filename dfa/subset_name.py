from __future__ import annotations

from typing import Iterable


def canonical_name(subset: Iterable[str]) -> str:
    """把 NFA 状态子集转成 DFA 状态名。

    空集 -> ""，单元素 {s} -> "s"，其余 -> "{a,b,...}"（排序后拼接，与插入顺序无关）。
    """
    items = sorted(set(subset))
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return "{" + ",".join(items) + "}"
