"""Examples router — bundled reference circuits as documents."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from wirelang.examples import EXAMPLES
from wirelang.schemas.db import WireLangDb
from wirelang.transform.compiler import compile_dsl_to_db

router = APIRouter()


@router.get("/", response_model=list[str])
async def list_examples():
    return sorted(EXAMPLES)


@router.get(
    "/{name}",
    response_model=WireLangDb,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def get_example(name: str):
    """Compile a bundled example circuit to a document."""
    builder = EXAMPLES.get(name)
    if builder is None:
        raise HTTPException(status_code=404, detail=f"Unknown example: {name}")
    return compile_dsl_to_db(builder())
