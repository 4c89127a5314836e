import hashlib
import json
from typing import Dict, List, Optional
from ..config.settings import settings
from ..models.schemas import ContextNode
from .elasticsearch_service import ElasticsearchService


class NodeNotFoundError(LookupError):
    """Raised when no indexed node matches an identifier"""


def dimension_combination_hash(dimensions: Optional[Dict[str, List[str]]]) -> str:
    """Hash of a dimension combination as written by the indexer.

    The indexer encodes an empty combination as a JSON list, so "[]" is
    hashed for it rather than "{}".
    """
    if dimensions:
        encoded = json.dumps(dimensions, separators=(",", ":"))
    else:
        encoded = "[]"
    return hashlib.md5(encoded.encode("utf-8")).hexdigest()


class NodeRepository:
    """Resolves content nodes from the content index"""

    def __init__(self, es_service: ElasticsearchService):
        self.es_service = es_service

    def build_lookup_query(self, identifier: str, workspace: str, dimensions: Dict[str, List[str]]) -> dict:
        return {
            "query": {
                "bool": {
                    "filter": [
                        {"term": {"__identifier": identifier}},
                        {"terms": {"__workspace": [workspace]}},
                        {"term": {"__dimensionCombinationHash": dimension_combination_hash(dimensions)}}
                    ]
                }
            },
            "size": 1,
            "_source": ["__identifier", "__path"]
        }

    def get_node_by_identifier(
        self,
        identifier: str,
        workspace: str = None,
        dimensions: Optional[Dict[str, List[str]]] = None
    ) -> ContextNode:
        """Look up a node in the given workspace and dimension context"""
        if workspace is None:
            workspace = settings.suggest_workspace
        dimensions = dimensions or {}

        response = self.es_service.execute_search(self.build_lookup_query(identifier, workspace, dimensions))

        hits = response["hits"]["hits"]
        if not hits:
            raise NodeNotFoundError(f"No node with identifier '{identifier}' in workspace '{workspace}'")

        return ContextNode(
            identifier=identifier,
            path=hits[0]["_source"]["__path"],
            workspace=workspace,
            dimensions=dimensions
        )
