"""Shared fixtures: two sites with channels and contents covering every routing case."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
import yaml

from sitelink.config.settings import ResolverSettings, SitelinkConfig
from sitelink.data_primitives.models import Site
from sitelink.infra.memory_store import InMemorySiteStore
from sitelink.urls.engine import UrlResolver


def build_fixture_data() -> dict[str, Any]:
    return {
        "sites": [
            {"id": 1, "site_dir": "site1", "web_url": "/site1"},
            {"id": 100, "site_dir": "site2", "web_url": "http://s2.example.com/"},
        ],
        "channels": [
            {"id": 1, "site_id": 1, "parent_id": 0},
            {"id": 2, "site_id": 1, "parent_id": 1},
            {"id": 3, "site_id": 1, "parent_id": 1, "link_type": "LinkToFirstContent"},
            {"id": 4, "site_id": 1, "parent_id": 1, "link_type": "LinkToFirstContent"},
            {"id": 5, "site_id": 1, "parent_id": 1, "link_type": "NoLink"},
            {"id": 6, "site_id": 1, "parent_id": 1, "link_url": "http://example.org/out"},
            {"id": 7, "site_id": 1, "parent_id": 1, "file_path": "/about/index.html"},
            {"id": 8, "site_id": 1, "parent_id": 1, "link_type": "LinkToFirstChannel"},
            {"id": 9, "site_id": 1, "parent_id": 8, "taxis": 2},
            {"id": 10, "site_id": 1, "parent_id": 8, "taxis": 1},
            {"id": 11, "site_id": 1, "parent_id": 1, "link_type": "LinkToLastAddChannel"},
            {"id": 12, "site_id": 1, "parent_id": 11, "add_date": datetime(2024, 1, 1)},
            {"id": 13, "site_id": 1, "parent_id": 11, "add_date": datetime(2024, 6, 1)},
            {"id": 17, "site_id": 1, "parent_id": 17, "link_type": "LinkToFirstChannel"},
            {"id": 100, "site_id": 100, "parent_id": 0},
            {"id": 101, "site_id": 100, "parent_id": 100},
        ],
        "contents": [
            {"id": 20, "channel_id": 2, "site_id": 1},
            {"id": 21, "channel_id": 2, "site_id": 1, "link_url": "http://ext.example"},
            {"id": 22, "channel_id": 2, "site_id": 1, "reference_id": 21},
            {
                "id": 23,
                "channel_id": 2,
                "site_id": 1,
                "reference_id": 21,
                "translate_content_type": "ReferenceContent",
            },
            {"id": 24, "channel_id": 2, "site_id": 1, "source_id": 101, "reference_id": 200},
            {"id": 25, "channel_id": 2, "site_id": 1, "source_id": 2, "reference_id": 25},
            {"id": 27, "channel_id": 2, "site_id": 1, "source_id": 2, "reference_id": 24},
            {"id": 28, "channel_id": 2, "site_id": 1, "reference_id": 999},
            {"id": 30, "channel_id": 3, "site_id": 1, "taxis": 1},
            {"id": 31, "channel_id": 3, "site_id": 1, "taxis": 2},
            {"id": 32, "channel_id": 3, "site_id": 1, "taxis": 3},
            {"id": 200, "channel_id": 101, "site_id": 100},
            {"id": 201, "channel_id": 101, "site_id": 100, "source_id": 2, "reference_id": 20},
        ],
        "templates": [
            {"id": 1, "site_id": 1, "index": True, "created_file_full_name": "@/index.html"},
            {"id": 2, "site_id": 1, "created_file_full_name": "@/sitemap.xml"},
        ],
        "specials": [
            {"id": 1, "site_id": 1, "url": "@/special/about/"},
        ],
    }


@pytest.fixture
def fixture_data() -> dict[str, Any]:
    return build_fixture_data()


@pytest.fixture
def store(fixture_data) -> InMemorySiteStore:
    return InMemorySiteStore.from_mapping(fixture_data)


@pytest.fixture
def config(tmp_path: Path) -> SitelinkConfig:
    return SitelinkConfig(resolver=ResolverSettings(physical_root=tmp_path))


@pytest.fixture
def resolver(store, config) -> UrlResolver:
    return UrlResolver(store, config=config)


@pytest.fixture
def site1(store) -> Site:
    return store.get_site(1)


@pytest.fixture
def site2(store) -> Site:
    return store.get_site(100)


@pytest.fixture
def fixture_file(tmp_path: Path, fixture_data) -> Path:
    path = tmp_path / "sites.yml"
    path.write_text(yaml.safe_dump(fixture_data, sort_keys=False), encoding="utf-8")
    return path
