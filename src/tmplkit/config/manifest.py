"""Template manifest loading.

A template directory may hold a ``.tmplkit.yaml`` manifest declaring the
variables the template needs::

    variables:
      - name: project_name
        ask: Name of the project
      - name: license
        default_value: MIT
        select_in_values: [MIT, Apache-2.0]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ManifestError
from ..variables import VariableDef

MANIFEST_FILENAMES = (".tmplkit.yaml", ".tmplkit.yml")


class TemplateManifest(BaseModel):
    """Variables declared by one template."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    variables: List[VariableDef] = Field(default_factory=list)

    @field_validator("variables")
    @classmethod
    def check_unique_names(cls, variables: List[VariableDef]) -> List[VariableDef]:
        seen: set[str] = set()
        for variable in variables:
            if variable.name in seen:
                raise ValueError(f"duplicate variable name: {variable.name!r}")
            seen.add(variable.name)
        return variables

    def get(self, name: str) -> Optional[VariableDef]:
        for variable in self.variables:
            if variable.name == name:
                return variable
        return None


def find_manifest(template_dir: Path) -> Optional[Path]:
    """Return the manifest path inside a template directory, if any."""
    for filename in MANIFEST_FILENAMES:
        candidate = template_dir / filename
        if candidate.is_file():
            return candidate
    return None


def parse_manifest(data: Any, source: str = "<manifest>") -> TemplateManifest:
    """Validate already-loaded manifest data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestError(f"{source}: expected a mapping at top level")
    try:
        return TemplateManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(f"{source}: {exc}") from exc


def load_manifest(path: Path) -> TemplateManifest:
    """Load and validate a manifest YAML file."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ManifestError(f"{path}: invalid YAML: {exc}") from exc
    except OSError as exc:
        raise ManifestError(f"{path}: cannot read manifest: {exc}") from exc
    return parse_manifest(data, source=str(path))


def default_context(manifest: TemplateManifest) -> Dict[str, Any]:
    """Build a render context from the variables that carry a default."""
    return {
        variable.name: variable.default_value
        for variable in manifest.variables
        if variable.default_value is not None
    }
