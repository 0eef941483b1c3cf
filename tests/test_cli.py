import json
from pathlib import Path

import pytest

from _manifests import FIREFOX_63_UA, build, write_manifest
from entrypoint_assets.cli import main


@pytest.fixture
def manifest_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for name in ("NODE_ENV", "ENTRYPOINT_ASSETS_DEVELOPMENT", "ENTRYPOINT_ASSETS_HOST"):
        monkeypatch.delenv(name, raising=False)
    modern = build("modern", ["/modern.js"], ["/modern.css"], browsers=["firefox 60"])
    modern["manifest"]["entrypoints"]["main"]["js"][0]["integrity"] = "sha384-abc"
    return write_manifest(
        tmp_path / "assets.json",
        [modern, build("legacy", ["/legacy.js"], ["/legacy.css"])],
    )


def test_resolve_json(manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--manifest", str(manifest_path), "resolve", "--user-agent", FIREFOX_63_UA])
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "entrypoint": "main",
        "scripts": [{"path": "/modern.js", "integrity": "sha384-abc"}],
        "styles": [{"path": "/modern.css"}],
    }


def test_resolve_html_development(manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--manifest", str(manifest_path), "resolve", "--development", "--asset-host", "/dev/", "--format", "html"])
    assert capsys.readouterr().out.splitlines() == [
        '<link rel="stylesheet" href="/legacy.css">',
        '<script src="/dev/dll/vendor.js"></script>',
        '<script src="/legacy.js"></script>',
    ]


def test_resolve_missing_entrypoint_exits(manifest_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--manifest", str(manifest_path), "resolve", "--entrypoint", "admin"])
    assert "Available entrypoints: main" in str(exc.value)


def test_validate_summary(manifest_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--manifest", str(manifest_path), "validate"])
    out = capsys.readouterr().out
    assert "- Builds: 2" in out
    assert "- modern: browsers=firefox 60 entrypoints=main" in out
    assert "- legacy: browsers=any entrypoints=main" in out


def test_validate_schema_failure_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "assets.json"
    path.write_text(json.dumps([{"name": "broken"}]), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--manifest", str(path), "validate"])
    assert "schema validation failed" in str(exc.value)


def test_missing_manifest_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["--manifest", str(tmp_path / "missing.json"), "resolve"])
    assert "Unable to read manifest" in str(exc.value)


def test_schema_printed_and_written(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(tmp_path)
    main(["schema"])
    printed = json.loads(capsys.readouterr().out)
    assert printed["title"] == "ConsolidatedManifest"

    main(["schema", "--output", str(tmp_path / "out" / "assets.schema.json")])
    written = json.loads((tmp_path / "out" / "assets.schema.json").read_text(encoding="utf-8"))
    assert written == printed
