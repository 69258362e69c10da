"""Crew Domain Module"""
from .entities.crew_member import CrewMember
from .value_objects.crew_role import parse_role
from .value_objects.movie_id import parse_movie_id
from .value_objects.query_policy import InvalidQueryParamsPolicy, QueryPolicy

__all__ = [
    "CrewMember",
    "parse_movie_id",
    "parse_role",
    "QueryPolicy",
    "InvalidQueryParamsPolicy",
]
