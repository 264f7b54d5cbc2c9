"""URL resolution engine."""

from sitelink.urls.channel import ChannelUrlResolver
from sitelink.urls.content import ContentUrlResolver
from sitelink.urls.engine import UrlResolver
from sitelink.urls.hops import HopBudget
from sitelink.urls.navigation import NavigationUrlResolver
from sitelink.urls.pages import PageUrlResolver
from sitelink.urls.site import SiteUrlResolver

__all__ = [
    "ChannelUrlResolver",
    "ContentUrlResolver",
    "HopBudget",
    "NavigationUrlResolver",
    "PageUrlResolver",
    "SiteUrlResolver",
    "UrlResolver",
]
