"""Request Validation"""
from .query_params import (
    CrewMembersQueryParams,
    InvalidQueryParamsError,
    query_params_schema,
    validate_query_params,
)

__all__ = [
    "CrewMembersQueryParams",
    "InvalidQueryParamsError",
    "query_params_schema",
    "validate_query_params",
]
