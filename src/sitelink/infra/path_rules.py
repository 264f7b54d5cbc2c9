"""Template-based file path rules for published channels and contents.

Rules are strings with ``{@name}`` tokens, e.g. ``/contents/{@channelId}/{@contentId}.html``.
Supported tokens: ``siteId``, ``channelId``, ``contentId``, ``year``, ``month``,
``day`` (from the content's add date) and ``taxis``. Unknown tokens are left
in place so a misconfigured rule is visible in the resulting URL.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime

from sitelink.config.settings import PathRuleSettings
from sitelink.data_primitives.models import Content, Site

_TOKEN_RE = re.compile(r"\{@(\w+)\}")


def render_rule(rule: str, values: Mapping[str, object]) -> str:
    """Substitute ``{@token}`` placeholders (case-insensitive token names).

    Examples:
        >>> render_rule("/channels/{@channelId}.html", {"channelid": 7})
        '/channels/7.html'

    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1).lower()
        if key not in values:
            return match.group(0)
        return str(values[key])

    return _TOKEN_RE.sub(_replace, rule)


class TemplatePathRules:
    """Default rules from settings, with optional per-channel overrides."""

    def __init__(
        self,
        settings: PathRuleSettings | None = None,
        *,
        channel_rules: Mapping[int, str] | None = None,
        content_rules: Mapping[int, str] | None = None,
    ) -> None:
        self.settings = settings or PathRuleSettings()
        self.channel_rules = dict(channel_rules or {})
        self.content_rules = dict(content_rules or {})

    def channel_file_path(self, site: Site, channel_id: int) -> str:
        rule = self.channel_rules.get(channel_id, self.settings.channel_file_path)
        return render_rule(rule, {"siteid": site.id, "channelid": channel_id})

    def content_file_path(self, site: Site, channel_id: int, content: Content) -> str:
        rule = self.content_rules.get(channel_id, self.settings.content_file_path)
        added = content.add_date or datetime(1970, 1, 1)
        return render_rule(
            rule,
            {
                "siteid": site.id,
                "channelid": channel_id,
                "contentid": content.id,
                "year": f"{added.year:04d}",
                "month": f"{added.month:02d}",
                "day": f"{added.day:02d}",
                "taxis": content.taxis,
            },
        )
