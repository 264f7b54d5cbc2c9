"""Preview-mode URLs served by the platform's preview API."""

from __future__ import annotations

from urllib.parse import urlencode


class ApiPreviewRouter:
    """Builds ``{api_prefix}/preview/{site_id}?...`` URLs.

    Example:
        >>> ApiPreviewRouter("/api").content_url(1, 2, 3)
        '/api/preview/1?channelId=2&contentId=3'

    """

    def __init__(self, api_prefix: str = "/api") -> None:
        self.api_prefix = api_prefix.rstrip("/")

    def _url(self, site_id: int, **params: int) -> str:
        url = f"{self.api_prefix}/preview/{site_id}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def site_url(self, site_id: int) -> str:
        return self._url(site_id)

    def channel_url(self, site_id: int, channel_id: int) -> str:
        return self._url(site_id, channelId=channel_id)

    def file_url(self, site_id: int, template_id: int) -> str:
        return self._url(site_id, fileTemplateId=template_id)

    def content_url(self, site_id: int, channel_id: int, content_id: int) -> str:
        return self._url(site_id, channelId=channel_id, contentId=content_id)

    def special_url(self, site_id: int, special_id: int) -> str:
        return self._url(site_id, specialId=special_id)
