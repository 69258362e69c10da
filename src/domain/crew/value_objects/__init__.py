"""Crew Value Objects"""
from .crew_role import parse_role
from .movie_id import parse_movie_id
from .query_policy import InvalidQueryParamsPolicy, QueryPolicy

__all__ = ["parse_movie_id", "parse_role", "QueryPolicy", "InvalidQueryParamsPolicy"]
