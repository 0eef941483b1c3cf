from .manifest import Asset, ConsolidatedManifest, ConsolidatedManifestEntry, Entrypoint, Manifest

__all__ = ["Asset", "Entrypoint", "Manifest", "ConsolidatedManifestEntry", "ConsolidatedManifest"]
