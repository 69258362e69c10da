"""Crew Role Value Object"""
from __future__ import annotations

from typing import Any


def parse_role(value: Any) -> str | None:
    """パスパラメータから crewRole を取得（空文字は未指定）"""
    if not isinstance(value, str) or not value:
        return None
    return value
