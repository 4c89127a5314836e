from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class ContextNode(BaseModel):
    identifier: str
    path: str
    workspace: str = "live"
    dimensions: Dict[str, List[str]] = {}


class SuggestRequest(BaseModel):
    """Body of a POST suggestion request; term is validated by the service, not here"""
    model_config = ConfigDict(populate_by_name=True)

    context_node_identifier: str = Field(alias="contextNodeIdentifier")
    term: Any = None


class SuggestResponse(BaseModel):
    completions: List[str] = []
    suggestions: List[Dict[str, Any]] = []
    errors: Optional[List[str]] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    template_cache_entries: int
    indexes_available: List[str]
