"""Movie ID Value Object"""
from __future__ import annotations

from typing import Any


def parse_movie_id(value: Any) -> int | None:
    """
    パスパラメータから movieId を解析

    数値として解釈できない値、および 0 は未指定として扱う。

    Args:
        value: パスパラメータの生の値

    Returns:
        movieId、または解析できない場合は None
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        movie_id = int(str(value).strip())
    except ValueError:
        return None

    return movie_id or None
