"""Document router — stateless validate / render / summary endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from wirelang.core.component import PinNotFoundError
from wirelang.core.schematic import Schematic
from wirelang.schemas.db import WireLangDb
from wirelang.schemas.documents import (
    DslRenderRequest,
    DslRenderResponse,
    SummaryResponse,
)
from wirelang.schemas.validation import ValidationResult
from wirelang.transform.calls import UnsupportedComponentError
from wirelang.transform.loader import schematic_from_db
from wirelang.transform.reverse import reverse_db_to_dsl

logger = logging.getLogger(__name__)

router = APIRouter()


def _rebuild(document: WireLangDb) -> Schematic:
    try:
        return schematic_from_db(document)
    except (UnsupportedComponentError, PinNotFoundError) as e:
        logger.warning("Rejected document %r: %s", document.name, e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/validate", response_model=ValidationResult)
async def validate_document(document: WireLangDb):
    """Rebuild the document's schematic and run every topology check."""
    return _rebuild(document).validate()


@router.post("/dsl", response_model=DslRenderResponse)
async def render_dsl(request: DslRenderRequest):
    """Generate Python source that rebuilds the document."""
    try:
        source = reverse_db_to_dsl(request.document, request.options)
    except UnsupportedComponentError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return DslRenderResponse(name=request.document.name, source=source)


@router.post("/summary", response_model=SummaryResponse)
async def summarize_document(document: WireLangDb):
    schematic = _rebuild(document)
    return SummaryResponse(
        name=schematic.name,
        component_count=len(schematic.components),
        node_count=len(schematic.nodes),
        summary=schematic.summary(),
    )
