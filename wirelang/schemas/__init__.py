from wirelang.schemas.db import (
    SCHEMA_ID,
    ComponentParams,
    DbComponent,
    DbNode,
    DbPin,
    DbToDslOptions,
    DocumentValidationError,
    WireLangDb,
    parse_db,
)
from wirelang.schemas.validation import (
    ValidationFinding,
    ValidationResult,
    ValidationSeverity,
    ValidationStatus,
)

__all__ = [
    "SCHEMA_ID",
    "ComponentParams",
    "DbComponent",
    "DbNode",
    "DbPin",
    "DbToDslOptions",
    "DocumentValidationError",
    "WireLangDb",
    "parse_db",
    "ValidationFinding",
    "ValidationResult",
    "ValidationSeverity",
    "ValidationStatus",
]
