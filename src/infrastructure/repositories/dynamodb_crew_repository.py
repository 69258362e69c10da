"""DynamoDB Crew Repository Implementation"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from src.application.ports.crew_repository import CrewRepositoryError, ICrewRepository
from src.domain.crew import CrewMember, QueryPolicy

logger = structlog.get_logger()


class DynamoDBCrewRepository(ICrewRepository):
    """
    DynamoDB ベースの Crew Repository

    テーブル設計:
    - PK: movieId (N)
    - SK: crewRole (S)
    - GSI roleIx: movieId + crewRole（前方一致検索用）

    1 回の呼び出しにつき Query か Scan を 1 回だけ発行する。
    name フィルタ付きの場合は Scan + FilterExpression となる。
    """

    def __init__(
        self,
        table: Any,
        query_policy: QueryPolicy = QueryPolicy.INDEX_PREFIX,
        index_name: str = "roleIx",
    ):
        self._table = table
        self._query_policy = query_policy
        self._index_name = index_name

    def find_by_movie_and_role(
        self,
        movie_id: int,
        role: str,
        name: str | None = None,
    ) -> list[CrewMember]:
        if not self._query_policy.supports_name_filter:
            name = None

        operation, params = self._build_request(movie_id, role, name)
        log = logger.bind(
            table=self._table.name,
            operation=operation,
            index=params.get("IndexName"),
        )

        try:
            if operation == "scan":
                response = self._table.scan(**params)
            else:
                response = self._table.query(**params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "ClientError")
            log.error("crew_query_failed", error_code=code, error=str(e))
            raise CrewRepositoryError("Failed to read crew members", cause_code=code) from e
        except BotoCoreError as e:
            log.error("crew_query_failed", error_code=type(e).__name__, error=str(e))
            raise CrewRepositoryError(
                "Failed to read crew members", cause_code=type(e).__name__
            ) from e

        items = response.get("Items", [])
        log.info("crew_items_retrieved", count=len(items))
        return [CrewMember.from_item(item) for item in items]

    def _build_request(
        self,
        movie_id: int,
        role: str,
        name: str | None,
    ) -> tuple[str, dict[str, Any]]:
        """Query / Scan のパラメータを組み立てる"""
        params: dict[str, Any] = {}
        if self._query_policy.uses_index:
            params["IndexName"] = self._index_name

        if name is None:
            params["KeyConditionExpression"] = Key("movieId").eq(movie_id) & self._role_key(role)
            return "query", params

        # name フィルタはキー条件で表現できないため Scan に落ちる
        params["FilterExpression"] = (
            Attr("movieId").eq(movie_id)
            & self._role_attr(role)
            & Attr("names").contains(name)
        )
        return "scan", params

    def _role_key(self, role: str):
        if self._query_policy.uses_index:
            return Key("crewRole").begins_with(role)
        return Key("crewRole").eq(role)

    def _role_attr(self, role: str):
        if self._query_policy.uses_index:
            return Attr("crewRole").begins_with(role)
        return Attr("crewRole").eq(role)


@lru_cache()
def get_dynamodb_table(table_name: str, region: str, endpoint_url: str | None = None):
    """
    DynamoDB Table リソースを取得

    実行環境ごとに 1 度だけ生成し、ウォームスタート間で接続を再利用する。
    """
    dynamodb = boto3.resource("dynamodb", region_name=region, endpoint_url=endpoint_url)
    return dynamodb.Table(table_name)
