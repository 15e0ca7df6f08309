"""
Pydantic models for templates and scales.

These define the on-disk template schema and serializable scale summaries.
"""

from diatonic_scale.models.scale import ScaleSummary
from diatonic_scale.models.template import ScaleTemplateDefinition

__all__ = [
    "ScaleSummary",
    "ScaleTemplateDefinition",
]
