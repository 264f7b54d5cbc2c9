"""In-memory site store.

Holds sites, channels and content tables in plain dictionaries and satisfies
every lookup protocol the resolvers need. Useful for tests, the CLI, and as
a reference for backends that wrap a real database.

Fixture layout (YAML or any mapping)::

    sites:
      - {id: 1, site_dir: site1, web_url: /site1}
    channels:
      - {id: 1, site_id: 1, parent_id: 0}
      - {id: 2, site_id: 1, parent_id: 1, link_type: LinkToFirstContent}
    contents:
      - {id: 10, channel_id: 2, site_id: 1, link_url: "http://ext.example"}
    templates:
      - {id: 1, site_id: 1, index: true, created_file_full_name: "@/index.html"}
    specials:
      - {id: 1, site_id: 1, url: "@/special/about/"}

``content_num`` and ``children_count`` are counted from the fixture when a
channel row leaves them out. Content columns that are not model fields
(``title``, ``author``, ...) are kept in ``Content.attributes``.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sitelink.data_primitives.models import Channel, Content, Site, TaxisType
from sitelink.infra.exceptions import DuplicateRecordError, FixtureLoadError

logger = logging.getLogger(__name__)

DEFAULT_INDEX_FILE = "@/index.html"


def default_table_name(site_id: int) -> str:
    return f"sitelink_content_{site_id}"


def _sort_value(content: Content, field_name: str) -> tuple[bool, Any]:
    value = getattr(content, field_name)
    if value is None:
        return (True, datetime.min)
    return (False, value)


class InMemorySiteStore:
    """Dictionary-backed implementation of the site, channel, content and template lookups.

    Channel identifiers are unique across sites, so a channel can be found
    without knowing its site.
    """

    def __init__(
        self,
        sites: Iterable[Site] = (),
        channels: Iterable[Channel] = (),
        contents: Iterable[Content] = (),
    ) -> None:
        self._sites: dict[int, Site] = {}
        self._channels: dict[int, Channel] = {}
        self._tables: dict[str, dict[int, Content]] = defaultdict(dict)
        self._index_templates: dict[int, int] = {}
        self._template_files: dict[tuple[int, int], str] = {}
        self._specials: dict[tuple[int, int], str] = {}

        for site in sites:
            self.add_site(site)
        for channel in channels:
            self.add_channel(channel)
        for content in contents:
            self.add_content(content)

    # Loading

    def add_site(self, site: Site) -> None:
        if site.id in self._sites:
            raise DuplicateRecordError("site", site.id)
        self._sites[site.id] = site

    def add_channel(self, channel: Channel) -> None:
        if channel.id in self._channels:
            raise DuplicateRecordError("channel", channel.id)
        self._channels[channel.id] = channel

    def add_content(self, content: Content, table_name: str | None = None) -> None:
        """Store ``content`` in ``table_name`` (default: the table of its channel)."""
        if table_name is None:
            site = self._sites.get(content.site_id)
            if site is not None:
                table_name = self.get_content_table_name(site, content.channel_id)
            else:
                table_name = default_table_name(content.site_id)
        table = self._tables[table_name]
        if content.id in table:
            raise DuplicateRecordError("content", content.id)
        table[content.id] = content

    def add_template(self, site_id: int, template_id: int, created_file_full_name: str, *, index: bool = False) -> None:
        self._template_files[(site_id, template_id)] = created_file_full_name
        if index:
            self._index_templates[site_id] = template_id

    def add_special(self, site_id: int, special_id: int, url: str) -> None:
        self._specials[(site_id, special_id)] = url

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> InMemorySiteStore:
        """Build a store from plain data (see the module docstring for the layout)."""
        content_rows = list(data.get("contents") or [])
        channel_rows = list(data.get("channels") or [])

        content_counts: dict[int, int] = defaultdict(int)
        for row in content_rows:
            content_counts[int(row["channel_id"])] += 1
        children_counts: dict[int, int] = defaultdict(int)
        for row in channel_rows:
            parent_id = int(row.get("parent_id") or 0)
            if parent_id:
                children_counts[parent_id] += 1

        store = cls(sites=(Site.model_validate(row) for row in data.get("sites") or []))
        for row in channel_rows:
            values = dict(row)
            values.setdefault("content_num", content_counts[int(values["id"])])
            values.setdefault("children_count", children_counts[int(values["id"])])
            store.add_channel(Channel.model_validate(values))
        for row in content_rows:
            values = dict(row)
            table_name = values.pop("table_name", None)
            extra = {key: values.pop(key) for key in list(values) if key not in Content.model_fields}
            if extra:
                values["attributes"] = {**extra, **(values.get("attributes") or {})}
            store.add_content(Content.model_validate(values), table_name)
        for row in data.get("templates") or []:
            store.add_template(
                int(row["site_id"]),
                int(row["id"]),
                str(row.get("created_file_full_name", "")),
                index=bool(row.get("index", False)),
            )
        for row in data.get("specials") or []:
            store.add_special(int(row["site_id"]), int(row["id"]), str(row.get("url", "")))
        return store

    @classmethod
    def from_yaml(cls, path: Path) -> InMemorySiteStore:
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as exc:
            raise FixtureLoadError(path, str(exc)) from exc
        except yaml.YAMLError as exc:
            raise FixtureLoadError(path, f"invalid YAML: {exc}") from exc

        if not isinstance(data, dict):
            raise FixtureLoadError(path, f"root must be a mapping, got {type(data).__name__}")
        try:
            store = cls.from_mapping(data)
        except (ValidationError, KeyError, TypeError, ValueError) as exc:
            raise FixtureLoadError(path, str(exc)) from exc
        logger.debug(
            "Loaded %d site(s), %d channel(s), %d table(s) from %s",
            len(store._sites),
            len(store._channels),
            len(store._tables),
            path,
        )
        return store

    # SiteLookup

    def get_site(self, site_id: int) -> Site | None:
        return self._sites.get(site_id)

    # ChannelLookup

    def get_channel(self, site_id: int, channel_id: int) -> Channel | None:
        channel = self._channels.get(channel_id)
        if channel is None or channel.site_id != site_id:
            return None
        return channel

    def channel_exists(self, site_id: int, channel_id: int) -> bool:
        return self.get_channel(site_id, channel_id) is not None

    def channel_exists_globally(self, channel_id: int) -> bool:
        return channel_id in self._channels

    def get_owning_site_id(self, channel_id: int) -> int:
        channel = self._channels.get(channel_id)
        return channel.site_id if channel is not None else 0

    def _children(self, channel_id: int) -> list[Channel]:
        return [channel for channel in self._channels.values() if channel.parent_id == channel_id]

    def get_child_by_latest_add(self, channel_id: int) -> Channel | None:
        children = self._children(channel_id)
        if not children:
            return None
        return max(children, key=lambda c: (c.add_date or datetime.min, c.id))

    def get_child_by_lowest_taxis(self, channel_id: int) -> Channel | None:
        children = self._children(channel_id)
        if not children:
            return None
        return min(children, key=lambda c: (c.taxis, c.id))

    # ContentLookup

    def get_content_table_name(self, site: Site, channel: Channel | int) -> str:
        if isinstance(channel, int):
            channel = self._channels.get(channel)
        if channel is not None and channel.table_name:
            return channel.table_name
        return site.table_name or default_table_name(site.id)

    def get_content(self, table_name: str, content_id: int) -> Content | None:
        return self._tables.get(table_name, {}).get(content_id)

    def get_channel_id_of_content(self, table_name: str, content_id: int) -> int:
        content = self.get_content(table_name, content_id)
        return content.channel_id if content is not None else 0

    def get_field_value(self, table_name: str, content_id: int, field: str) -> str:
        content = self.get_content(table_name, content_id)
        if content is None:
            return ""
        if field in Content.model_fields:
            value = getattr(content, field)
        else:
            value = content.attributes.get(field)
        return "" if value is None else str(value)

    def get_first_content_id(self, table_name: str, channel_id: int, taxis_type: TaxisType) -> int:
        rows = [c for c in self._tables.get(table_name, {}).values() if c.channel_id == channel_id]
        if not rows:
            return 0
        field_name = taxis_type.field_name
        rows.sort(key=lambda c: (_sort_value(c, field_name), c.id), reverse=taxis_type.descending)
        return rows[0].id

    # TemplateLookup

    def index_template_id(self, site_id: int) -> int:
        return self._index_templates.get(site_id, 0)

    def created_file_full_name(self, site_id: int, template_id: int) -> str:
        file_name = self._template_files.get((site_id, template_id))
        if file_name is None and template_id == self.index_template_id(site_id):
            return DEFAULT_INDEX_FILE
        return file_name or ""

    def special_url(self, site: Site, special_id: int) -> str:
        return self._specials.get((site.id, special_id), "")
