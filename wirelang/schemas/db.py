"""Portable document schema (``wirelang-db@v1``).

JSON keys are camelCase (``nodeId``, ``isGround``); Python attributes are
snake_case. Dump with ``by_alias=True, exclude_none=True`` so absent
optional keys stay absent.
"""

from __future__ import annotations

import json
import keyword
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from wirelang.config import get_settings
from wirelang.core.types import PinDirection

SCHEMA_ID = "wirelang-db@v1"


class DocumentValidationError(Exception):
    """Raised when raw data is not a valid wirelang document."""

    def __init__(self, source: str, errors: str):
        self.source = source
        self.errors = errors
        super().__init__(f"[{source}] Document validation failed: {errors}")


class _DbModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DbPin(_DbModel):
    id: str
    name: str
    direction: PinDirection | None = None
    node_id: str | None = None


class DbNode(_DbModel):
    id: str
    name: str | None = None
    is_ground: bool | None = None


class ComponentParams(_DbModel):
    """``value`` + ``unit`` plus any variant keys (sourceType, model, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    value: float
    unit: str

    def get(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)


class DbComponent(_DbModel):
    id: str
    # Kept as a plain string: unknown tags are rejected by the transforms,
    # not by parsing.
    type: str
    label: str | None = None
    params: ComponentParams
    pins: list[DbPin] = Field(default_factory=list)
    extras: dict[str, Any] | None = None

    def extra(self, key: str, default: Any = None) -> Any:
        """Look a variant field up in extras, then in params."""
        if self.extras and key in self.extras:
            return self.extras[key]
        return self.params.get(key, default)


class WireLangDb(_DbModel):
    schema_id: Literal["wirelang-db@v1"] = Field(default=SCHEMA_ID, alias="schema")
    name: str
    components: list[DbComponent] = Field(default_factory=list)
    nodes: list[DbNode] = Field(default_factory=list)
    meta: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_json(self, indent: int | None = None) -> str:
        if indent is None:
            indent = get_settings().json_indent
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


class DbToDslOptions(BaseModel):
    module_import: str = Field(default_factory=lambda: get_settings().module_import)
    export_name: str = Field(default_factory=lambda: get_settings().export_name)
    preserve_ids: bool = Field(default_factory=lambda: get_settings().preserve_ids)

    @field_validator("export_name")
    @classmethod
    def _assignable_name(cls, value: str) -> str:
        # Emitted as an assignment target in the generated module.
        if not value.isidentifier() or keyword.iskeyword(value):
            raise ValueError(f"export_name must be a Python identifier, got {value!r}")
        return value


def parse_db(data: dict[str, Any] | str | bytes, source: str = "document") -> WireLangDb:
    """Validate raw JSON (text or decoded) as a ``WireLangDb``."""
    try:
        if isinstance(data, (str, bytes)):
            return WireLangDb.model_validate_json(data)
        return WireLangDb.model_validate(data)
    except ValidationError as e:
        raise DocumentValidationError(source=source, errors=str(e)) from e
