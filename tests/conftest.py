from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import pytest

from src.application.ports.crew_repository import CrewRepositoryError, ICrewRepository
from src.domain.crew import CrewMember


class InMemoryCrewRepository(ICrewRepository):
    """
    テスト用の読み取り専用リポジトリ

    role は前方一致、name はリスト属性に対する DynamoDB contains と同じく要素の完全一致。
    """

    def __init__(self, members: list[CrewMember] | None = None, error: Exception | None = None):
        self.members = members or []
        self.error = error
        self.calls: list[tuple[int, str, str | None]] = []

    def find_by_movie_and_role(self, movie_id, role, name=None):
        self.calls.append((movie_id, role, name))
        if self.error:
            raise self.error
        return [
            m
            for m in self.members
            if m.movie_id == movie_id
            and m.crew_role.startswith(role)
            and (name is None or name in (m.names or []))
        ]


@dataclass
class FakeLambdaContext:
    aws_request_id: str = "req-123"
    function_name: str = "getCrewMembersByMovieId"


@pytest.fixture
def crew_items() -> list[dict[str, Any]]:
    return [
        {"movieId": Decimal("42"), "crewRole": "director", "names": ["Jane Smith"]},
        {"movieId": Decimal("42"), "crewRole": "director of photography", "names": ["Ann Lee", "Smith"]},
        {"movieId": Decimal("42"), "crewRole": "producer", "names": ["Bob Ray"]},
        {"movieId": Decimal("7"), "crewRole": "director", "names": ["Smith"]},
    ]


@pytest.fixture
def crew_members(crew_items) -> list[CrewMember]:
    return [CrewMember.from_item(item) for item in crew_items]


@pytest.fixture
def repository(crew_members) -> InMemoryCrewRepository:
    return InMemoryCrewRepository(crew_members)


@pytest.fixture
def failing_repository() -> InMemoryCrewRepository:
    return InMemoryCrewRepository(
        error=CrewRepositoryError("Failed to read crew members", cause_code="ResourceNotFoundException")
    )


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def make_event():
    """API Gateway プロキシイベントを組み立てる"""

    def _make(
        movie_id: str | None = "42",
        role: str | None = "director",
        query: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        path_parameters = {}
        if movie_id is not None:
            path_parameters["movieId"] = movie_id
        if role is not None:
            path_parameters["role"] = role
        return {
            "rawPath": f"/movies/{movie_id}/crew/{role}",
            "pathParameters": path_parameters or None,
            "queryStringParameters": query,
            "requestContext": {"requestId": "apigw-req-1"},
        }

    return _make
