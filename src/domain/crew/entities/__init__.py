from .crew_member import CrewMember

__all__ = ["CrewMember"]
