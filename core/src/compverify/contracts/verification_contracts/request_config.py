from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .scope import Scope


class VerifierRef(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scheme: str = Field(min_length=1)
    scope: Scope = Scope.PARAMETERS

    @field_validator("scope", mode="before")
    @classmethod
    def _parse_scope(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Scope.from_string(value)
        return value


class VerifierSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    reference_marker: str = Field(default="#", min_length=1)
    placeholder_prefix: str = Field(default="{{", min_length=1)
    placeholder_suffix: str = Field(default="}}", min_length=1)


class VerificationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    verifier: VerifierRef
    settings: VerifierSettings = Field(default_factory=VerifierSettings)
    parameters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("parameters", mode="before")
    @classmethod
    def _coerce_parameters_dict(cls, value: Any) -> dict[str, Any]:
        if value is None:
            return {}
        if isinstance(value, dict):
            return value
        raise ValueError("parameters must be a mapping")
