"""Crew Repository Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.crew import CrewMember


class CrewRepositoryError(Exception):
    """ストレージ読み取りエラー"""

    def __init__(self, message: str, cause_code: str | None = None):
        super().__init__(message)
        self.cause_code = cause_code


class ICrewRepository(ABC):
    """
    Crew Repository Interface

    クルーメンバーの読み取り専用リポジトリ。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    """

    @abstractmethod
    def find_by_movie_and_role(
        self,
        movie_id: int,
        role: str,
        name: str | None = None,
    ) -> list[CrewMember]:
        """
        movieId と crewRole でクルーメンバーを取得

        Args:
            movie_id: 映画ID（パーティションキー）
            role: クルーロール（方式により完全一致または前方一致）
            name: 指定された場合 names に含まれるものだけを返す

        Raises:
            CrewRepositoryError: ストレージへの読み取りに失敗した場合
        """
        pass
