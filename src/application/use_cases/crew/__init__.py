"""Crew Use Cases"""
from .get_crew_members import (
    GetCrewMembersInput,
    GetCrewMembersOutput,
    GetCrewMembersUseCase,
    MissingParameterError,
)

__all__ = [
    "GetCrewMembersInput",
    "GetCrewMembersOutput",
    "GetCrewMembersUseCase",
    "MissingParameterError",
]
