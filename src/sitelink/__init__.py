"""sitelink: URL resolution for multi-site channel/content publishing."""

from sitelink.data_primitives.models import Channel, Content, LinkType, Mode, Site
from sitelink.urls.engine import UrlResolver

__version__ = "0.1.0"
__all__ = [
    "Channel",
    "Content",
    "LinkType",
    "Mode",
    "Site",
    "UrlResolver",
]
