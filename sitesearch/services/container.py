from .elasticsearch_service import ElasticsearchService
from .template_cache import TemplateCache
from .node_repository import NodeRepository
from .suggest_service import SuggestionRequestBuilder, SuggestService
from .health_service import HealthService


class ServiceContainer:
    """Dependency injection container for managing service instances"""

    def __init__(self, elasticsearch_service: ElasticsearchService = None):
        # Initialize services
        self._elasticsearch_service = elasticsearch_service or ElasticsearchService()
        self._template_cache = TemplateCache()
        self._node_repository = NodeRepository(self._elasticsearch_service)
        self._request_builder = SuggestionRequestBuilder(self._node_repository, self._template_cache)
        self._suggest_service = SuggestService(self._elasticsearch_service, self._request_builder)
        self._health_service = HealthService(self._elasticsearch_service, self._template_cache)

    @property
    def elasticsearch_service(self) -> ElasticsearchService:
        return self._elasticsearch_service

    @property
    def template_cache(self) -> TemplateCache:
        return self._template_cache

    @property
    def node_repository(self) -> NodeRepository:
        return self._node_repository

    @property
    def request_builder(self) -> SuggestionRequestBuilder:
        return self._request_builder

    @property
    def suggest_service(self) -> SuggestService:
        return self._suggest_service

    @property
    def health_service(self) -> HealthService:
        return self._health_service


# Global container instance
container = ServiceContainer()


def get_suggest_service() -> SuggestService:
    return container.suggest_service


def get_health_service() -> HealthService:
    return container.health_service
