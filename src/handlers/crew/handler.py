"""
Movie Crew Lambda Handler

GET /movies/{movieId}/crew/{role}?name=...
- movieId + crewRole で DynamoDB からクルーメンバーを取得
- name 指定時は names に含まれるメンバーのみ
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

import structlog

from src.application.ports.crew_repository import CrewRepositoryError, ICrewRepository
from src.application.use_cases.crew import (
    GetCrewMembersInput,
    GetCrewMembersUseCase,
    MissingParameterError,
)
from src.application.validation import InvalidQueryParamsError
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.logging import bind_request_context, configure_logging
from src.infrastructure.repositories import DynamoDBCrewRepository, get_dynamodb_table
from src.infrastructure.serialization import dumps

logger = structlog.get_logger()


@lru_cache()
def get_crew_repository() -> ICrewRepository:
    """Crew Repository の依存性注入（実行環境ごとに 1 度だけ生成）"""
    settings = get_settings()
    table = get_dynamodb_table(
        settings.table_name,
        settings.region,
        settings.dynamodb_endpoint_url,
    )
    return DynamoDBCrewRepository(
        table,
        query_policy=settings.query_policy,
        index_name=settings.role_index_name,
    )


def lambda_handler(
    event: dict,
    context: Any,
    repository: ICrewRepository | None = None,
    settings: Settings | None = None,
) -> dict:
    """Lambda エントリポイント"""
    expose_error_details = False

    try:
        settings = settings or get_settings()
        expose_error_details = settings.expose_error_details
        configure_logging(settings.service_name, settings.log_level)
        bind_request_context(event, context)
        logger.info("event_received", raw_event=event)

        event = event or {}
        path_parameters = event.get("pathParameters") or {}

        use_case = GetCrewMembersUseCase(
            repository or get_crew_repository(),
            query_policy=settings.query_policy,
            invalid_params_policy=settings.invalid_query_params,
        )
        result = use_case.execute(
            GetCrewMembersInput(
                movie_id=path_parameters.get("movieId"),
                role=path_parameters.get("role"),
                query_params=event.get("queryStringParameters"),
            )
        )
        return response(200, {"data": result.items})

    except MissingParameterError as e:
        logger.warning("missing_parameter", message=str(e))
        return response(400, {"Message": str(e)})

    except InvalidQueryParamsError as e:
        return response(500, {"message": str(e), "schema": e.schema})

    except CrewRepositoryError as e:
        error: dict[str, Any] = {"code": "StorageError", "message": str(e)}
        if expose_error_details and e.cause_code:
            error["cause"] = e.cause_code
        return response(500, {"error": error})

    except Exception:
        logger.exception("unhandled_error")
        return response(500, {
            "error": {"code": "InternalError", "message": "An unexpected error occurred"},
        })


def response(status_code: int, body: dict) -> dict:
    """API Gateway レスポンス形式"""
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json',
            'Access-Control-Allow-Origin': '*',
        },
        'body': dumps(body),
    }
