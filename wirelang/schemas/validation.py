from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class ValidationSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class ValidationFinding(BaseModel):
    code: str
    severity: ValidationSeverity
    message: str
    refs: list[str] = Field(default_factory=list)


class ValidationStatus(str, Enum):
    VALID = "VALID"
    INVALID = "INVALID"


class ValidationResult(BaseModel):
    status: ValidationStatus
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    findings: list[ValidationFinding] = Field(default_factory=list)
    checks_passed: int = 0
    checks_total: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return self.status == ValidationStatus.VALID
