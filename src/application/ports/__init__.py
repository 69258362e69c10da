"""Application Ports (Interfaces)"""
from .crew_repository import CrewRepositoryError, ICrewRepository

__all__ = [
    "ICrewRepository",
    "CrewRepositoryError",
]
