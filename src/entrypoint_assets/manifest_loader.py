from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import ValidationError as JsonSchemaValidationError
from jsonschema import validate

from .exceptions import ManifestSchemaError
from .models.manifest import ConsolidatedManifest
from .models.schema_export import consolidated_manifest_json_schema

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_RELATIVE_PATH = Path("build") / "client" / "assets.json"


def default_manifest_path(app_root: Path) -> Path:
    return app_root / DEFAULT_MANIFEST_RELATIVE_PATH


def read_manifest_document(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def read_consolidated_manifest(path: Path) -> ConsolidatedManifest:
    """Read and validate the build's ``assets.json``.

    I/O, JSON and validation failures propagate as raised by ``pathlib``,
    ``json`` and pydantic respectively.
    """
    logger.debug("Reading consolidated manifest from %s", path)
    manifest = ConsolidatedManifest.model_validate(read_manifest_document(path))
    logger.debug("Loaded %d build(s) from %s", len(manifest), path)
    return manifest


def validate_manifest_document(data: Any, schema: dict | None = None) -> None:
    """Check a raw manifest document against the JSON schema of the manifest models."""
    schema = schema or consolidated_manifest_json_schema()
    try:
        validate(instance=data, schema=schema)
    except JsonSchemaValidationError as exc:
        raise ManifestSchemaError(f"Manifest schema validation failed: {exc.message}") from exc
