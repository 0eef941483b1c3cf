"""User-agent and browserslist target parsing.

User agents are reduced to a browserslist family name plus a numeric version.
Detection is regex based and ordered: browsers that embed another browser's
token (Edge and Opera carry ``Chrome/``, Chrome carries ``Safari/``) are tried
first.  iOS browsers all run WebKit, so every iOS user agent maps to
``ios_saf`` with the OS version.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

Version = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class ParsedUserAgent:
    family: str
    version: Version


@dataclass(frozen=True, slots=True)
class BrowserTarget:
    family: str
    # None means every version of the family ("all")
    version: Version | None


_VERSION = r"(\d+(?:[._]\d+){0,2})"

_UA_RULES: list[tuple[str, re.Pattern[str]]] = [
    ("op_mini", re.compile(r"Opera Mini/" + _VERSION)),
    ("ios_saf", re.compile(r"(?:iPhone|iPad|iPod).*?OS " + _VERSION)),
    ("edge", re.compile(r"(?:Edge|Edg|EdgA|EdgiOS)/" + _VERSION)),
    ("opera", re.compile(r"(?:OPR|Opera)/" + _VERSION)),
    ("samsung", re.compile(r"SamsungBrowser/" + _VERSION)),
    ("and_uc", re.compile(r"UCBrowser/" + _VERSION)),
    ("ie", re.compile(r"MSIE " + _VERSION)),
    ("ie", re.compile(r"Trident/.*?rv:" + _VERSION)),
    ("and_chr", re.compile(r"Android.*?Chrome/" + _VERSION)),
    ("and_ff", re.compile(r"Android.*?Firefox/" + _VERSION)),
    ("android", re.compile(r"Android " + _VERSION + r".*?Version/\d")),
    ("firefox", re.compile(r"Firefox/" + _VERSION)),
    ("chrome", re.compile(r"(?:Chrome|Chromium|CriOS)/" + _VERSION)),
    ("safari", re.compile(r"Version/" + _VERSION + r".*?Safari/")),
]

# Names browserslist prints for ``--json``/``browsers`` output, keyed by lower case.
_FAMILY_ALIASES: dict[str, str] = {
    "fx": "firefox",
    "ff": "firefox",
    "ios": "ios_saf",
    "explorer": "ie",
    "blackberry": "bb",
    "explorermobile": "ie_mob",
    "operamini": "op_mini",
    "operamobile": "op_mob",
    "chromeandroid": "and_chr",
    "firefoxandroid": "and_ff",
    "ucandroid": "and_uc",
    "qqandroid": "and_qq",
}

_ANY_VERSION = "all"

# Technology Preview sorts after every numbered release, so no shipped
# version satisfies a "safari TP" entry on its own.
TECHNOLOGY_PREVIEW: Version = (2**31 - 1, 0, 0)


def parse_version(raw: str) -> Version:
    parts = [int(part) for part in re.split(r"[._]", raw) if part.isdigit()]
    parts += [0] * (3 - len(parts))
    return parts[0], parts[1], parts[2]


def normalize_family(name: str) -> str:
    lowered = name.strip().lower()
    return _FAMILY_ALIASES.get(lowered, lowered)


def parse_user_agent(user_agent: str) -> ParsedUserAgent | None:
    for family, pattern in _UA_RULES:
        match = pattern.search(user_agent)
        if match:
            return ParsedUserAgent(family=family, version=parse_version(match.group(1)))
    return None


def parse_browser_query(entry: str) -> BrowserTarget | None:
    """Parse a resolved browserslist entry such as ``"chrome 70"`` or ``"ios_saf 12.0-12.1"``.

    ``all`` matches every version; ``TP`` is ordered after every numbered version.
    """
    parts = entry.split()
    if len(parts) != 2:
        return None

    family, raw_version = parts
    if raw_version.lower() == _ANY_VERSION:
        return BrowserTarget(family=normalize_family(family), version=None)
    if raw_version.lower() == "tp":
        return BrowserTarget(family=normalize_family(family), version=TECHNOLOGY_PREVIEW)

    # ranges list every version they cover; the lower bound is the floor
    lower = raw_version.split("-", 1)[0]
    if not re.fullmatch(r"\d+(?:\.\d+){0,2}", lower):
        return None
    return BrowserTarget(family=normalize_family(family), version=parse_version(lower))
