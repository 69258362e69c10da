"""Get Crew Members Use Case"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

import structlog

from src.application.ports.crew_repository import ICrewRepository
from src.application.validation import InvalidQueryParamsError, validate_query_params
from src.domain.crew import (
    InvalidQueryParamsPolicy,
    QueryPolicy,
    parse_movie_id,
    parse_role,
)

logger = structlog.get_logger()


class MissingParameterError(Exception):
    """必須パスパラメータが欠落している"""

    pass


@dataclass
class GetCrewMembersInput:
    """取得入力DTO（API Gateway の生のパラメータ）"""

    movie_id: Any = None
    role: Any = None
    query_params: dict[str, Any] | None = None


@dataclass
class GetCrewMembersOutput:
    """取得出力DTO"""

    movie_id: int
    role: str
    name: str | None = None
    items: list[dict[str, Any]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)


class GetCrewMembersUseCase:
    """
    クルーメンバー取得 ユースケース

    パスパラメータを検証し、クエリパラメータの name フィルタを解決した上で
    リポジトリに 1 回だけ読み取りを依頼する。
    """

    def __init__(
        self,
        crew_repository: ICrewRepository,
        query_policy: QueryPolicy = QueryPolicy.INDEX_PREFIX,
        invalid_params_policy: InvalidQueryParamsPolicy = InvalidQueryParamsPolicy.IGNORE,
    ):
        self._crew_repo = crew_repository
        self._query_policy = query_policy
        self._invalid_params_policy = invalid_params_policy

    def execute(self, input_data: GetCrewMembersInput) -> GetCrewMembersOutput:
        """
        ユースケースを実行

        Raises:
            MissingParameterError: movieId または role が不正な場合
            InvalidQueryParamsError: reject 方式でクエリパラメータが不正な場合
            CrewRepositoryError: 読み取りに失敗した場合
        """
        movie_id = parse_movie_id(input_data.movie_id)
        if movie_id is None:
            raise MissingParameterError("Missing movieId parameter")

        role = parse_role(input_data.role)
        if role is None:
            raise MissingParameterError("Missing role parameter")

        name = self._resolve_name(input_data.query_params)

        log = logger.bind(movie_id=movie_id, role=role, query_policy=self._query_policy.value)
        log.info("crew_lookup_started", name_filter=name is not None)

        start_time = time.perf_counter()
        members = self._crew_repo.find_by_movie_and_role(movie_id, role, name=name)
        duration_ms = (time.perf_counter() - start_time) * 1000

        output = GetCrewMembersOutput(
            movie_id=movie_id,
            role=role,
            name=name,
            items=[member.to_dict() for member in members],
        )
        log.info("crew_lookup_completed", count=output.count, duration_ms=round(duration_ms, 2))

        return output

    def _resolve_name(self, query_params: dict[str, Any] | None) -> str | None:
        """name フィルタを決定（使わない場合は None）"""
        if not self._query_policy.supports_name_filter or not query_params:
            return None

        try:
            return validate_query_params(query_params).name
        except InvalidQueryParamsError as e:
            logger.warning(
                "query_params_invalid",
                errors=e.errors,
                policy=self._invalid_params_policy.value,
            )
            if self._invalid_params_policy is InvalidQueryParamsPolicy.REJECT:
                raise
            return None
