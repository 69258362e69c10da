"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.crew import InvalidQueryParamsPolicy, QueryPolicy


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Service
    service_name: str = "movie-crew-api"
    log_level: str = "INFO"

    # DynamoDB
    table_name: str = "MovieCrew"
    region: str = "eu-west-1"
    role_index_name: str = "roleIx"
    dynamodb_endpoint_url: str | None = None  # LocalStack 等

    # Query behaviour
    query_policy: QueryPolicy = QueryPolicy.INDEX_PREFIX
    invalid_query_params: InvalidQueryParamsPolicy = InvalidQueryParamsPolicy.IGNORE
    expose_error_details: bool = False


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
