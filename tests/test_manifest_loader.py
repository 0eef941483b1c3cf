import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from _manifests import build, write_manifest
from entrypoint_assets.exceptions import ManifestSchemaError
from entrypoint_assets.manifest_loader import (
    default_manifest_path,
    read_consolidated_manifest,
    validate_manifest_document,
)
from entrypoint_assets.models.manifest import ConsolidatedManifest
from entrypoint_assets.models.schema_export import consolidated_manifest_json_schema, write_consolidated_manifest_schema


def test_default_manifest_path(tmp_path: Path) -> None:
    assert default_manifest_path(tmp_path) == tmp_path / "build" / "client" / "assets.json"


def test_read_preserves_order_and_ignores_extra_keys(tmp_path: Path) -> None:
    entry = build("modern", ["/vendor.js", "/main.js"], browsers=["chrome 70"])
    entry["manifest"]["entrypoints"]["main"]["js"][0]["integrity"] = "sha384-abc"
    entry["manifest"]["publicPath"] = "/assets/"
    entry["manifest"]["entrypoints"]["error"] = {"js": [{"path": "/error.js"}]}
    path = write_manifest(tmp_path / "assets.json", [entry, build("legacy", ["/legacy.js"])])

    manifest = read_consolidated_manifest(path)

    assert [item.name for item in manifest] == ["modern", "legacy"]
    assert manifest[1].browsers is None
    main = manifest[0].manifest.entrypoints["main"]
    assert [asset.path for asset in main.js] == ["/vendor.js", "/main.js"]
    assert main.js[0].integrity == "sha384-abc"
    assert list(manifest[0].manifest.entrypoints) == ["main", "error"]
    assert manifest[0].manifest.entrypoints["error"].css == []


def test_read_propagates_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "assets.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        read_consolidated_manifest(path)


def test_read_rejects_non_list_document(tmp_path: Path) -> None:
    path = tmp_path / "assets.json"
    path.write_text(json.dumps({"entrypoints": {}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        read_consolidated_manifest(path)


def test_schema_validation() -> None:
    validate_manifest_document([build("only", ["/a.js"])])
    with pytest.raises(ManifestSchemaError) as exc:
        validate_manifest_document([{"name": "broken"}])
    assert "manifest" in str(exc.value)


def test_schema_accepts_what_the_models_accept() -> None:
    document = [{"name": "bare", "manifest": {}}, {"name": "css-only", "manifest": {"entrypoints": {"main": {"css": []}}}}]
    validate_manifest_document(document)
    manifest = ConsolidatedManifest.model_validate(document)
    assert manifest[0].manifest.entrypoints == {}


def test_schema_rejects_empty_asset_path() -> None:
    with pytest.raises(ManifestSchemaError):
        validate_manifest_document([build("only", [""])])


def test_write_schema(tmp_path: Path) -> None:
    schema_path = write_consolidated_manifest_schema(tmp_path / "schema" / "assets.schema.json")
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    assert schema["type"] == "array"
    assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
    assert schema == consolidated_manifest_json_schema()
