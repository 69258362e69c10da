"""Repository Implementations"""
from .dynamodb_crew_repository import DynamoDBCrewRepository, get_dynamodb_table

__all__ = ["DynamoDBCrewRepository", "get_dynamodb_table"]
