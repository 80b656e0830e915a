"""Loading of actual values and specs from YAML/JSON documents."""

from __future__ import annotations

from pathlib import Path

import yaml


class SpecDocumentError(Exception):
    """Raised when a spec or actual-value document cannot be loaded."""


def load_document(document_path: Path | str) -> object:
    """Load a YAML or JSON document (JSON is read as YAML).

    Raises:
      SpecDocumentError: If the file is missing or cannot be parsed.
    """
    path = Path(document_path)
    if not path.exists():
        raise SpecDocumentError(f"Document not found: {path}")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise SpecDocumentError(f"Failed to parse document {path}: {exc}") from exc
