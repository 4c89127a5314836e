import json
from typing import Any, Dict, List
from ..config.settings import settings
from ..config.logger import logger
from ..models.schemas import ContextNode, SuggestResponse
from .elasticsearch_service import ElasticsearchService
from .node_repository import NodeRepository, dimension_combination_hash
from .template_cache import TemplateCache

# Stands in for the search term inside cached templates
TERM_PLACEHOLDER = "---term-soh2gufuNi---"

TERM_TYPE_ERROR = "term has to be a string"
QUERY_ERROR = "Could not execute query"


def substitute_term(document: Any, term: str) -> Any:
    """Replace the placeholder in every string value of a parsed query document"""
    if isinstance(document, dict):
        return {key: substitute_term(value, term) for key, value in document.items()}
    if isinstance(document, list):
        return [substitute_term(value, term) for value in document]
    if isinstance(document, str):
        return document.replace(TERM_PLACEHOLDER, term)
    return document


class SuggestionRequestBuilder:
    """Builds completion/suggestion queries from per-context cached templates"""

    def __init__(self, node_repository: NodeRepository, template_cache: TemplateCache):
        self.node_repository = node_repository
        self.template_cache = template_cache
        self.workspace = settings.suggest_workspace
        self.completion_field = settings.completion_field
        self.suggestion_field = settings.suggestion_field
        self.completion_size = settings.completion_size

    def build_base_query(self, node: ContextNode) -> dict:
        """Query for all visible documents at or below the node, in its workspace and dimensions"""
        return {
            "query": {
                "bool": {
                    "must": [{"match_all": {}}],
                    "filter": {
                        "bool": {
                            "must": [
                                {
                                    "bool": {
                                        "should": [
                                            {"term": {"__parentPath": node.path}},
                                            {"term": {"__path": node.path}}
                                        ]
                                    }
                                },
                                {"terms": {"__workspace": [node.workspace]}},
                                {"term": {"__dimensionCombinationHash": dimension_combination_hash(node.dimensions)}}
                            ],
                            "should": [],
                            "must_not": [
                                {"term": {"_hidden": True}},
                                {"range": {"_hiddenBeforeDateTime": {"gt": "now"}}},
                                {"range": {"_hiddenAfterDateTime": {"lt": "now"}}}
                            ]
                        }
                    }
                }
            },
            "_source": ["__path"]
        }

    def build_template(self, context_node_identifier: str) -> str:
        """Build the serialized query template for a context node"""
        node = self.node_repository.get_node_by_identifier(context_node_identifier, workspace=self.workspace)

        query = self.build_base_query(node)
        query["query"]["bool"]["filter"]["bool"]["must"].append(
            {"prefix": {self.completion_field: TERM_PLACEHOLDER}}
        )
        query["size"] = 1
        query["aggregations"] = {
            "autocomplete": {
                "terms": {
                    "field": self.completion_field,
                    "size": self.completion_size,
                    "order": {"_count": "desc"},
                    "include": TERM_PLACEHOLDER + ".*"
                }
            }
        }
        query["suggest"] = {
            "suggestions": {
                "text": TERM_PLACEHOLDER,
                "completion": {
                    "field": self.suggestion_field,
                    "fuzzy": True,
                    "contexts": {
                        "parentPath": [node.path],
                        "workspace": [self.workspace],
                        "dimensionCombinationHash": [dimension_combination_hash(node.dimensions)]
                    }
                }
            }
        }

        logger.debug("Built suggestion template for node %s at %s", node.identifier, node.path)
        return json.dumps(query)

    def build_request(self, term: str, context_node_identifier: str) -> dict:
        """Query document for term below the given context node.

        The term is not regex-escaped where it lands in the aggregation's
        include pattern, so a term such as "c++" makes the search fail.
        """
        term = term.lower()
        template = self.template_cache.get_or_compute(
            context_node_identifier,
            lambda: self.build_template(context_node_identifier)
        )
        return substitute_term(json.loads(template), term)

    def extract_completions(self, response: Dict[str, Any]) -> List[str]:
        """Extract autocomplete options"""
        aggregation = response.get("aggregations", {}).get("autocomplete")
        if not aggregation:
            return []
        return [bucket["key"] for bucket in aggregation.get("buckets", [])]

    def extract_suggestions(self, response: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Extract suggestion options of the first suggestion group"""
        groups = response.get("suggest", {}).get("suggestions") or []
        if not groups:
            return []
        options = groups[0].get("options") or []
        return list(options)


class SuggestService:
    """Service class for the suggest action"""

    def __init__(self, es_service: ElasticsearchService, request_builder: SuggestionRequestBuilder):
        self.es_service = es_service
        self.request_builder = request_builder

    async def suggest(self, context_node_identifier: str, term: Any) -> SuggestResponse:
        """Get completions and suggestions for term below the given context node"""
        if not isinstance(term, str):
            return SuggestResponse(completions=[], suggestions=[], errors=[TERM_TYPE_ERROR])

        try:
            request = self.request_builder.build_request(term, context_node_identifier)
            response = await self.es_service.search(request)
            completions = self.request_builder.extract_completions(response)
            suggestions = self.request_builder.extract_suggestions(response)
            return SuggestResponse(completions=completions, suggestions=suggestions)
        except Exception:
            logger.warning("Suggest query for node %s failed", context_node_identifier, exc_info=True)
            return SuggestResponse(completions=[], suggestions=[], errors=[QUERY_ERROR])
