"""Rendering of built documentation to YAML or JSON."""

import json

import yaml

from mvc_api_docs.model.base import Documentation

FORMATS = ("yaml", "json")


def render_documentation(documentation: Documentation, fmt: str = "yaml") -> str:
    """Render ``documentation`` as YAML or JSON, leaving out unset (None) fields."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}, expected one of {FORMATS}")
    if fmt == "json":
        return json.dumps(documentation.model_dump(mode="json", exclude_none=True), indent=2) + "\n"
    data = documentation.model_dump(exclude_none=True)
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
