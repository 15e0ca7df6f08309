"""
Template loader - reads and writes user-supplied scale template definitions.

Definitions are YAML files following the scale-template/v1 schema. Paths
may be absolute or relative to the loader's base directory; a missing
suffix defaults to .yaml.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from diatonic_scale.constants import TEMPLATE_SCHEMA, ErrorMessages
from diatonic_scale.core.template import ScaleTemplate
from diatonic_scale.errors import TemplateError
from diatonic_scale.models.template import ScaleTemplateDefinition

logger = logging.getLogger(__name__)


class TemplateLoader:
    """
    Loads scale templates from YAML definition files.

    Parsed definitions are cached by resolved path until saved over or
    the cache is cleared.
    """

    def __init__(self, base_path: Path | None = None):
        """
        Initialize the template loader.

        Args:
            base_path: Directory that relative template paths resolve against
        """
        self.base_path = base_path
        self._cache: dict[Path, ScaleTemplateDefinition] = {}

    def load(self, path: Path | str) -> ScaleTemplate:
        """
        Load a scale template.

        Args:
            path: Definition file, absolute or relative to the base path

        Returns:
            The runtime template

        Raises:
            TemplateError: If the file is missing, unparsable or invalid
        """
        return self.load_definition(path).to_template()

    def load_definition(self, path: Path | str) -> ScaleTemplateDefinition:
        """Load a template definition, keeping its metadata."""
        resolved = self._resolve(path)

        # Check cache
        if resolved in self._cache:
            return self._cache[resolved]

        if not resolved.exists():
            raise TemplateError(ErrorMessages.TEMPLATE_NOT_FOUND.format(path=resolved))

        try:
            with open(resolved, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise TemplateError(
                ErrorMessages.TEMPLATE_UNREADABLE.format(path=resolved, reason=e)
            ) from e

        definition = self._parse_template(data, resolved)
        self._cache[resolved] = definition
        logger.debug(f"Loaded scale template '{definition.name}' from {resolved}")
        return definition

    def save(self, template: ScaleTemplate, path: Path | str, description: str = "") -> Path:
        """
        Write a template as a YAML definition.

        Args:
            template: Template to write
            path: Destination, absolute or relative to the base path
            description: Optional description stored alongside the pattern

        Returns:
            Path of the written file
        """
        resolved = self._resolve(path)
        definition = ScaleTemplateDefinition.from_template(template, description)

        resolved.parent.mkdir(parents=True, exist_ok=True)
        with open(resolved, "w", encoding="utf-8") as f:
            yaml.safe_dump(definition.to_yaml_dict(), f, sort_keys=False)

        # Invalidate cache
        self._cache.pop(resolved, None)

        logger.debug(f"Saved scale template '{template.name}' to {resolved}")
        return resolved

    def clear_cache(self) -> None:
        """Clear the template cache."""
        self._cache.clear()

    def _resolve(self, path: Path | str) -> Path:
        """Resolve a template path against the base path."""
        resolved = Path(path)
        if not resolved.suffix:
            resolved = resolved.with_suffix(".yaml")
        if not resolved.is_absolute() and self.base_path is not None:
            resolved = self.base_path / resolved
        return resolved

    def _parse_template(self, data: Any, path: Path) -> ScaleTemplateDefinition:
        """Parse a template definition from YAML data."""
        if not isinstance(data, dict):
            raise TemplateError(
                ErrorMessages.TEMPLATE_UNREADABLE.format(path=path, reason="expected a mapping")
            )

        name = data.get("name", path.stem)

        if "steps" in data and "offsets" in data:
            raise TemplateError(ErrorMessages.TEMPLATE_BOTH_PATTERNS.format(name=name))
        if "steps" in data:
            steps = data["steps"]
        elif "offsets" in data:
            steps = ScaleTemplate.from_offsets(data["offsets"], name).steps
        else:
            raise TemplateError(ErrorMessages.TEMPLATE_MISSING_PATTERN.format(name=name))

        try:
            return ScaleTemplateDefinition(
                schema=data.get("schema", TEMPLATE_SCHEMA),
                name=name,
                description=data.get("description", ""),
                steps=steps,
            )
        except ValidationError as e:
            raise TemplateError(
                ErrorMessages.TEMPLATE_UNREADABLE.format(path=path, reason=e)
            ) from e
