from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field, RootModel


class Asset(BaseModel):
    path: str = Field(min_length=1)
    integrity: str | None = None


class Entrypoint(BaseModel):
    js: list[Asset] = Field(default_factory=list)
    css: list[Asset] = Field(default_factory=list)


class Manifest(BaseModel):
    entrypoints: dict[str, Entrypoint] = Field(default_factory=dict)


class ConsolidatedManifestEntry(BaseModel):
    name: str
    browsers: list[str] | None = None
    manifest: Manifest


class ConsolidatedManifest(RootModel[list[ConsolidatedManifestEntry]]):
    """Builds ordered from the most restrictive browser target to the fallback."""

    def __iter__(self) -> Iterator[ConsolidatedManifestEntry]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> ConsolidatedManifestEntry:
        return self.root[index]
