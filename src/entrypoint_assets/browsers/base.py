from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class BrowserMatcher(ABC):
    @abstractmethod
    def matches(self, user_agent: str, browsers: Sequence[str]) -> bool:
        raise NotImplementedError
