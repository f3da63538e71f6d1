from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

OptionType = Literal["string", "boolean", "integer", "number", "enum", "object", "duration"]


class OptionSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: OptionType = "string"
    required: bool = False
    enum: tuple[str, ...] = ()
    # multi-value options: every key starting with prefix belongs to this option
    prefix: str | None = None
    default: str | None = None
    description: str | None = None

    @model_validator(mode="after")
    def _validate_enum(self) -> OptionSchema:
        if self.type == "enum" and not self.enum:
            raise ValueError("enum options must list their allowed values")
        if self.type != "enum" and self.enum:
            raise ValueError(f"{self.type} options must not declare enum values")
        return self


class ComponentSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    scheme: str = Field(min_length=1)
    options: dict[str, OptionSchema] = Field(default_factory=dict)
    lenient: bool = False
    description: str | None = None
