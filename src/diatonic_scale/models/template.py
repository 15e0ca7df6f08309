"""
Template models - the schema of a user-supplied scale template definition.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from diatonic_scale.constants import TEMPLATE_SCHEMA
from diatonic_scale.core.template import ScaleTemplate


class ScaleTemplateDefinition(BaseModel):
    """
    A scale template as written in a definition file.

    Validated with the same rules as ScaleTemplate: 7 positive steps
    summing to an octave.
    """

    schema_version: str = Field(TEMPLATE_SCHEMA, alias="schema")
    name: str = Field(..., description="Template name, appended to the tonic symbol")
    description: str = Field("", description="Free-form description")
    steps: tuple[int, ...] = Field(
        ...,
        description="Semitone steps between consecutive degrees, ending at the octave",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("steps")
    @classmethod
    def validate_steps(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        # TemplateError is a ValueError, so pydantic reports it as a validation error
        ScaleTemplate(v)
        return v

    def to_template(self) -> ScaleTemplate:
        """Build the runtime template."""
        return ScaleTemplate(self.steps, self.name)

    @classmethod
    def from_template(
        cls, template: ScaleTemplate, description: str = ""
    ) -> ScaleTemplateDefinition:
        """Create a definition from a runtime template."""
        return cls(name=template.name, description=description, steps=template.steps)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "steps": list(self.steps),
        }
