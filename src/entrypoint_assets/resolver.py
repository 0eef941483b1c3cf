from __future__ import annotations

import logging

from .browsers import BrowserMatcher, BrowserslistMatcher
from .cache import ConsolidatedManifestCache, default_cache, shared_cache
from .config import AssetsConfig
from .exceptions import EntrypointLookupError, ManifestLoadError
from .models.manifest import Asset, Entrypoint, Manifest

logger = logging.getLogger(__name__)

DEFAULT_ENTRYPOINT = "main"


class AssetResolver:
    """Serve the script and style assets of the build that suits one user agent.

    A resolver is created per request.  The consolidated manifest is shared
    through ``cache``; the build chosen for ``user_agent`` is picked on first
    use and kept for the lifetime of the resolver.
    """

    def __init__(
        self,
        asset_host: str,
        user_agent: str | None = None,
        *,
        development: bool = False,
        cache: ConsolidatedManifestCache | None = None,
        matcher: BrowserMatcher | None = None,
    ) -> None:
        self.asset_host = asset_host
        self.user_agent = user_agent
        self.development = development
        self._cache = cache or default_cache()
        self._matcher = matcher or BrowserslistMatcher()
        self._resolved_manifest: Manifest | None = None

    @classmethod
    def from_config(
        cls,
        config: AssetsConfig,
        user_agent: str | None = None,
        cache: ConsolidatedManifestCache | None = None,
    ) -> AssetResolver:
        return cls(
            config.asset_host,
            user_agent,
            development=config.development,
            cache=cache or shared_cache(config.manifest_path),
        )

    async def scripts(self, name: str = DEFAULT_ENTRYPOINT) -> list[Asset]:
        entrypoint = get_assets_for_entrypoint(name, await self._get_resolved_manifest())
        scripts = list(entrypoint.js)
        if self.development:
            # The vendor DLL only exists in development builds and is not in the manifest.
            scripts.insert(0, Asset(path=f"{self.asset_host}dll/vendor.js"))
        return scripts

    async def styles(self, name: str = DEFAULT_ENTRYPOINT) -> list[Asset]:
        entrypoint = get_assets_for_entrypoint(name, await self._get_resolved_manifest())
        return list(entrypoint.css)

    async def _get_resolved_manifest(self) -> Manifest:
        if self._resolved_manifest is not None:
            return self._resolved_manifest

        consolidated = await self._cache.get()
        if len(consolidated) == 0:
            raise ManifestLoadError("No builds were found.")

        user_agent = self.user_agent
        last_entry = consolidated[-1]

        # 1. No user agent: use the last build, the least restrictive one.
        # 2. Only one build: use it however well it matches.
        # 3. Otherwise the first build that is unrestricted or whose browsers
        #    match the user agent, falling back to the last build.
        if user_agent is None or len(consolidated) == 1:
            selected = last_entry
        else:
            selected = next(
                (
                    entry
                    for entry in consolidated
                    if entry.browsers is None or self._matcher.matches(user_agent, entry.browsers)
                ),
                last_entry,
            )

        logger.debug("Selected build %r for user agent %r", selected.name, user_agent)
        self._resolved_manifest = selected.manifest
        return self._resolved_manifest


def get_assets_for_entrypoint(name: str, manifest: Manifest) -> Entrypoint:
    entrypoints = manifest.entrypoints
    if name not in entrypoints:
        available = list(entrypoints)
        if not available:
            guidance = "No entrypoints exist."
        else:
            guidance = (
                f"No entrypoints found with the name '{name}'. "
                f"Available entrypoints: {', '.join(available)}"
            )
        raise EntrypointLookupError(guidance, name=name, available=available)

    return entrypoints[name]
