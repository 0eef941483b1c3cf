from .base import BrowserMatcher
from .matcher import BrowserslistMatcher
from .useragent import BrowserTarget, ParsedUserAgent, parse_browser_query, parse_user_agent

__all__ = [
    "BrowserMatcher",
    "BrowserslistMatcher",
    "BrowserTarget",
    "ParsedUserAgent",
    "parse_browser_query",
    "parse_user_agent",
]
