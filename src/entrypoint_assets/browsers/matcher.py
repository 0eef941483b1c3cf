from __future__ import annotations

import logging
from collections.abc import Sequence

from .base import BrowserMatcher
from .useragent import BrowserTarget, ParsedUserAgent, Version, parse_browser_query, parse_user_agent

logger = logging.getLogger(__name__)


class BrowserslistMatcher(BrowserMatcher):
    """Match a user agent against resolved browserslist entries.

    The defaults are lenient upward: minor and patch numbers are ignored and a
    newer major version than any listed still matches, while the browser family
    and the major version floor are strict.
    """

    def __init__(
        self,
        ignore_minor: bool = True,
        ignore_patch: bool = True,
        allow_higher_versions: bool = True,
    ) -> None:
        self.ignore_minor = ignore_minor
        self.ignore_patch = ignore_patch
        self.allow_higher_versions = allow_higher_versions

    def matches(self, user_agent: str, browsers: Sequence[str]) -> bool:
        parsed = parse_user_agent(user_agent)
        if parsed is None:
            logger.debug("Unrecognised user agent: %r", user_agent)
            return False

        for entry in browsers:
            target = parse_browser_query(entry)
            if target is not None and self._matches_target(parsed, target):
                return True
        return False

    def _matches_target(self, parsed: ParsedUserAgent, target: BrowserTarget) -> bool:
        if parsed.family != target.family:
            return False
        if target.version is None:
            return True

        ua_version = self._significant(parsed.version)
        target_version = self._significant(target.version)
        if self.allow_higher_versions:
            return ua_version >= target_version
        return ua_version == target_version

    def _significant(self, version: Version) -> tuple[int, ...]:
        if self.ignore_minor:
            return version[:1]
        if self.ignore_patch:
            return version[:2]
        return version
