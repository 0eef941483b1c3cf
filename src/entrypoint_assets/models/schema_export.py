"""JSON schema of ``assets.json``, derived from the pydantic manifest models."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from .manifest import ConsolidatedManifest

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


@lru_cache(maxsize=1)
def _generated_schema() -> str:
    schema = {"$schema": SCHEMA_DIALECT, **ConsolidatedManifest.model_json_schema()}
    return json.dumps(schema, indent=2)


def consolidated_manifest_json_schema() -> dict:
    # fresh copy per call; callers may annotate the result
    return json.loads(_generated_schema())


def write_consolidated_manifest_schema(schema_path: Path) -> Path:
    schema_path.parent.mkdir(parents=True, exist_ok=True)
    schema_path.write_text(_generated_schema() + "\n", encoding="utf-8")
    return schema_path
