from typing import Dict, Any, List, Optional
from elasticsearch import Elasticsearch
from ..config.settings import settings
from ..config.logger import logger


class SearchExecutionError(Exception):
    """Raised when a search request could not be executed against the index"""


class ElasticsearchService:
    """Service class for Elasticsearch operations"""

    def __init__(self, client: Optional[Elasticsearch] = None, index: Optional[str] = None):
        if client is None:
            client = Elasticsearch(
                hosts=[settings.elasticsearch_url],
                basic_auth=settings.elasticsearch_auth,
                request_timeout=settings.elasticsearch_timeout
            )
        self.client = client
        self.index = index or settings.elasticsearch_index

    async def search(self, query: Dict[str, Any], index: str = None) -> Dict[str, Any]:
        """POST the query document to the _search endpoint of the content index"""
        return self.execute_search(query, index)

    def execute_search(self, query: Dict[str, Any], index: str = None) -> Dict[str, Any]:
        """Synchronous form of search()"""
        if index is None:
            index = self.index

        try:
            response = self.client.search(index=index, body=query)
        except Exception as e:
            raise SearchExecutionError(f"Elasticsearch search error: {str(e)}") from e

        # ObjectApiResponse wraps the decoded body
        return getattr(response, "body", response)

    async def check_index_health(self) -> List[str]:
        """Check whether the content index is available"""
        available_indexes = []
        try:
            if self.client.indices.exists(index=self.index):
                available_indexes.append(self.index)
        except Exception as e:
            logger.warning("Could not check index '%s': %s", self.index, e)
        return available_indexes

    async def get_index_stats(self) -> Dict[str, Any]:
        """Get statistics for the content index"""
        stats = {}
        try:
            if self.client.indices.exists(index=self.index):
                index_stats = self.client.indices.stats(index=self.index)
                stats[self.index] = {
                    "doc_count": index_stats["indices"][self.index]["total"]["docs"]["count"],
                    "size": index_stats["indices"][self.index]["total"]["store"]["size_in_bytes"]
                }
        except Exception as e:
            stats[self.index] = {"error": str(e)}
        return stats
