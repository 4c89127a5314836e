from datetime import datetime
from typing import Dict, Any
from ..models.schemas import HealthResponse
from ..config.settings import settings
from .elasticsearch_service import ElasticsearchService
from .template_cache import TemplateCache


class HealthService:
    """Service class for health checks and system status"""

    def __init__(self, es_service: ElasticsearchService, template_cache: TemplateCache):
        self.es_service = es_service
        self.template_cache = template_cache

    async def get_health_status(self) -> HealthResponse:
        """Get health status of the application"""
        try:
            available_indexes = await self.es_service.check_index_health()
            status = "OK" if available_indexes else "DEGRADED: content index unavailable"

            return HealthResponse(
                status=status,
                timestamp=datetime.now().isoformat(),
                template_cache_entries=len(self.template_cache),
                indexes_available=available_indexes
            )
        except Exception as e:
            return HealthResponse(
                status=f"ERROR: {str(e)}",
                timestamp=datetime.now().isoformat(),
                template_cache_entries=0,
                indexes_available=[]
            )

    async def get_detailed_status(self) -> Dict[str, Any]:
        """Get detailed system status including index statistics"""
        try:
            available_indexes = await self.es_service.check_index_health()
            index_stats = await self.es_service.get_index_stats()

            return {
                "status": "OK",
                "timestamp": datetime.now().isoformat(),
                "elasticsearch": {
                    "url": settings.elasticsearch_url,
                    "index": self.es_service.index,
                    "available_indexes": available_indexes,
                    "index_stats": index_stats
                },
                "configuration": {
                    "workspace": settings.suggest_workspace,
                    "completion_field": settings.completion_field,
                    "suggestion_field": settings.suggestion_field,
                    "completion_size": settings.completion_size,
                    "template_cache_entries": len(self.template_cache)
                },
                "api": {
                    "title": settings.api_title,
                    "version": settings.api_version
                }
            }
        except Exception as e:
            return {
                "status": f"ERROR: {str(e)}",
                "timestamp": datetime.now().isoformat(),
                "error_details": str(e)
            }
