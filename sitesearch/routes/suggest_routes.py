from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from ..models.schemas import SuggestRequest, SuggestResponse
from ..services.container import get_suggest_service
from ..services.suggest_service import SuggestService

router = APIRouter()


@router.get("/suggest", response_model=SuggestResponse, response_model_exclude_unset=True)
async def suggest(
    context_node_identifier: str = Query(..., alias="contextNodeIdentifier", description="Identifier of the node to search below"),
    term: Optional[str] = Query(None, description="Term typed so far"),
    service: SuggestService = Depends(get_suggest_service)
):
    """
    Get completions and suggestions for a partial search term.

    Features:
    - Case-insensitive matching
    - Completions are indexed terms starting with the term, most frequent first
    - Suggestions are fuzzy completion-suggester options
    - Scoped to the context node, the live workspace and its dimensions
    - Query errors are reported in `errors`, never as an HTTP error
    """
    try:
        return await service.suggest(context_node_identifier, term)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Suggest error: {str(e)}")


@router.post("/suggest", response_model=SuggestResponse, response_model_exclude_unset=True)
async def suggest_from_body(
    request: SuggestRequest,
    service: SuggestService = Depends(get_suggest_service)
):
    """Same as GET /suggest with the parameters sent as a JSON body"""
    try:
        return await service.suggest(request.context_node_identifier, request.term)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Suggest error: {str(e)}")
