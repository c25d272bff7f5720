from search_assistant.client.base import QueryService
from search_assistant.client.http import HttpQueryService

__all__ = [
    "HttpQueryService",
    "QueryService",
]
