"""Crew Query Policy"""
from enum import Enum


class QueryPolicy(str, Enum):
    """
    クエリ方式

    - EXACT: ベーステーブルを (movieId, crewRole) で完全一致検索
    - INDEX_PREFIX: roleIx インデックスを crewRole の前方一致で検索
    - INDEX_ONLY: INDEX_PREFIX と同じだが name フィルタを受け付けない
    """

    EXACT = "exact"
    INDEX_PREFIX = "index_prefix"
    INDEX_ONLY = "index_only"

    @property
    def supports_name_filter(self) -> bool:
        return self is not QueryPolicy.INDEX_ONLY

    @property
    def uses_index(self) -> bool:
        return self is not QueryPolicy.EXACT


class InvalidQueryParamsPolicy(str, Enum):
    """クエリパラメータのスキーマ違反時の扱い"""

    IGNORE = "ignore"
    REJECT = "reject"
