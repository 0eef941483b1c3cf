from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path

from entrypoint_assets.config import AssetsConfig, load_config_file, load_env_file
from entrypoint_assets.exceptions import EntrypointAssetsError
from entrypoint_assets.manifest_loader import read_manifest_document, validate_manifest_document
from entrypoint_assets.models.manifest import Asset, ConsolidatedManifest
from entrypoint_assets.models.schema_export import consolidated_manifest_json_schema, write_consolidated_manifest_schema
from entrypoint_assets.output.markup import script_tags, style_tags
from entrypoint_assets.resolver import DEFAULT_ENTRYPOINT, AssetResolver

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect the asset builds of a bundled web application")
    parser.add_argument("--config", default=None, help="Path to config file (.yaml/.yml/.json)")
    parser.add_argument("--manifest", default=None, help="Path to assets.json (overrides config)")
    parser.add_argument("--env-file", default=".env", help="Optional .env file loaded before reading config")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Show the assets served to a user agent")
    resolve.add_argument("--user-agent", default=None, help="User agent string; omit to get the fallback build")
    resolve.add_argument("--entrypoint", default=DEFAULT_ENTRYPOINT, help="Entrypoint name")
    resolve.add_argument("--asset-host", default=None, help="Base URL for development-only assets")
    resolve.add_argument("--development", action="store_true", help="Include the development vendor bundle")
    resolve.add_argument("--format", choices=["json", "html"], default="json", help="Output format")

    subparsers.add_parser("validate", help="Schema-check assets.json and summarise its builds")

    schema = subparsers.add_parser("schema", help="Print or write the JSON schema of assets.json")
    schema.add_argument("--output", default=None, help="Write the schema to this file instead of stdout")
    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> AssetsConfig:
    config = load_config_file(Path(args.config)) if args.config else AssetsConfig.from_env()
    if args.manifest:
        config.manifest_path = Path(args.manifest)
    if getattr(args, "asset_host", None):
        config.asset_host = args.asset_host
    if getattr(args, "development", False):
        config.development = True
    return config


async def _resolve(config: AssetsConfig, user_agent: str | None, entrypoint: str) -> tuple[list[Asset], list[Asset]]:
    resolver = AssetResolver.from_config(config, user_agent)
    scripts = await resolver.scripts(entrypoint)
    styles = await resolver.styles(entrypoint)
    return scripts, styles


def _run_resolve(config: AssetsConfig, args: argparse.Namespace) -> None:
    scripts, styles = asyncio.run(_resolve(config, args.user_agent, args.entrypoint))
    if args.format == "html":
        print(style_tags(styles))
        print(script_tags(scripts))
        return

    payload = {
        "entrypoint": args.entrypoint,
        "scripts": [asset.model_dump(exclude_none=True) for asset in scripts],
        "styles": [asset.model_dump(exclude_none=True) for asset in styles],
    }
    print(json.dumps(payload, indent=2))


def _run_validate(config: AssetsConfig) -> None:
    document = read_manifest_document(config.manifest_path)
    validate_manifest_document(document)
    manifest = ConsolidatedManifest.model_validate(document)

    print(f"Manifest: {config.manifest_path}")
    print(f"- Builds: {len(manifest)}")
    for entry in manifest:
        browsers = ", ".join(entry.browsers) if entry.browsers is not None else "any"
        entrypoints = ", ".join(entry.manifest.entrypoints) or "none"
        print(f"- {entry.name}: browsers={browsers} entrypoints={entrypoints}")
    if len(manifest) == 0:
        print("No builds were found.")


def _run_schema(output: str | None) -> None:
    if output is None:
        print(json.dumps(consolidated_manifest_json_schema(), indent=2))
        return
    path = write_consolidated_manifest_schema(Path(output))
    logger.info("Wrote manifest schema to %s", path)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    load_env_file(Path(args.env_file))
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")

    try:
        config = _build_config(args)
        logger.info("Using manifest %s", config.manifest_path)
        if args.command == "resolve":
            _run_resolve(config, args)
        elif args.command == "schema":
            _run_schema(args.output)
        else:
            _run_validate(config)
    except EntrypointAssetsError as exc:
        raise SystemExit(f"Error: {exc}") from exc
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Unable to read manifest: {exc}") from exc


if __name__ == "__main__":
    main()
