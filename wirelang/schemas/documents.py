from __future__ import annotations

from pydantic import BaseModel

from wirelang.schemas.db import DbToDslOptions, WireLangDb


class DslRenderRequest(BaseModel):
    document: WireLangDb
    options: DbToDslOptions | None = None


class DslRenderResponse(BaseModel):
    name: str
    source: str


class SummaryResponse(BaseModel):
    name: str
    component_count: int
    node_count: int
    summary: str
