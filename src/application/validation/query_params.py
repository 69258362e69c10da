"""Query String Parameter Schema"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class InvalidQueryParamsError(Exception):
    """クエリパラメータがスキーマに合致しない"""

    def __init__(self, message: str, schema: dict[str, Any], errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.schema = schema
        self.errors = errors or []


class CrewMembersQueryParams(BaseModel):
    """GET /movies/{movieId}/crew/{role} のクエリパラメータ"""

    model_config = ConfigDict(extra="ignore", title="MovieCrewMembersByMovieQueryParams")

    name: str = Field(..., min_length=1)


@lru_cache()
def query_params_schema() -> dict[str, Any]:
    """JSON Schema（エラーレスポンスに含める）"""
    return CrewMembersQueryParams.model_json_schema()


def validate_query_params(params: Any) -> CrewMembersQueryParams:
    """
    クエリパラメータを検証

    Raises:
        InvalidQueryParamsError: params がオブジェクトでない、または name が不正な場合
    """
    try:
        return CrewMembersQueryParams.model_validate(params)
    except ValidationError as e:
        raise InvalidQueryParamsError(
            "Invalid query parameters",
            schema=query_params_schema(),
            errors=[
                {"loc": list(err["loc"]), "type": err["type"], "msg": err["msg"]}
                for err in e.errors()
            ],
        ) from e
