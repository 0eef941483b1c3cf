from __future__ import annotations

from collections.abc import Iterable
from html import escape

from entrypoint_assets.models.manifest import Asset


def _attributes(asset: Asset, url_attribute: str, crossorigin: str) -> str:
    attrs = [f'{url_attribute}="{escape(asset.path)}"']
    if asset.integrity:
        attrs.append(f'integrity="{escape(asset.integrity)}"')
        attrs.append(f'crossorigin="{escape(crossorigin)}"')
    return " ".join(attrs)


def script_tags(assets: Iterable[Asset], *, crossorigin: str = "anonymous") -> str:
    return "\n".join(f"<script {_attributes(asset, 'src', crossorigin)}></script>" for asset in assets)


def style_tags(assets: Iterable[Asset], *, crossorigin: str = "anonymous") -> str:
    return "\n".join(
        f'<link rel="stylesheet" {_attributes(asset, "href", crossorigin)}>' for asset in assets
    )
