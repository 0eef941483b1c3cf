from .cache import ConsolidatedManifestCache, default_cache, internal_only_clear_cache, shared_cache
from .config import AssetsConfig
from .exceptions import (
    ConfigurationError,
    EntrypointAssetsError,
    EntrypointLookupError,
    ManifestLoadError,
    ManifestSchemaError,
)
from .models import Asset, ConsolidatedManifest, ConsolidatedManifestEntry, Entrypoint, Manifest
from .resolver import AssetResolver, get_assets_for_entrypoint

__all__ = [
    "Asset",
    "AssetResolver",
    "AssetsConfig",
    "ConfigurationError",
    "ConsolidatedManifest",
    "ConsolidatedManifestCache",
    "ConsolidatedManifestEntry",
    "Entrypoint",
    "EntrypointAssetsError",
    "EntrypointLookupError",
    "Manifest",
    "ManifestLoadError",
    "ManifestSchemaError",
    "default_cache",
    "get_assets_for_entrypoint",
    "internal_only_clear_cache",
    "shared_cache",
]
