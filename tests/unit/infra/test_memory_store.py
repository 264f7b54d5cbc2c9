"""Tests for the in-memory store."""

from datetime import datetime

import pytest

from sitelink.data_primitives.models import Channel, Content, Site, TaxisType
from sitelink.data_primitives.protocols import SiteStore
from sitelink.infra.exceptions import DuplicateRecordError, FixtureLoadError
from sitelink.infra.memory_store import InMemorySiteStore, default_table_name


def test_store_satisfies_protocol(store):
    assert isinstance(store, SiteStore)


class TestFromMapping:
    def test_counts_contents_and_children(self, store):
        assert store.get_channel(1, 3).content_num == 3
        assert store.get_channel(1, 8).children_count == 2
        assert store.get_channel(1, 2).children_count == 0

    def test_explicit_counts_are_kept(self):
        store = InMemorySiteStore.from_mapping(
            {
                "sites": [{"id": 1}],
                "channels": [{"id": 2, "site_id": 1, "parent_id": 1, "content_num": 7}],
            }
        )

        assert store.get_channel(1, 2).content_num == 7

    def test_explicit_table_name(self):
        store = InMemorySiteStore.from_mapping(
            {
                "sites": [{"id": 1}],
                "contents": [{"id": 5, "channel_id": 2, "site_id": 1, "table_name": "archive"}],
            }
        )

        assert store.get_content("archive", 5) is not None
        assert store.get_content(default_table_name(1), 5) is None

    def test_extra_content_columns_become_attributes(self):
        store = InMemorySiteStore.from_mapping(
            {
                "sites": [{"id": 1}],
                "contents": [{"id": 5, "channel_id": 2, "site_id": 1, "title": "Launch", "attributes": {"tag": "x"}}],
            }
        )
        table = default_table_name(1)

        assert store.get_content(table, 5).attributes == {"title": "Launch", "tag": "x"}
        assert store.get_field_value(table, 5, "title") == "Launch"

    def test_duplicate_channel_is_rejected(self):
        with pytest.raises(DuplicateRecordError):
            InMemorySiteStore(
                sites=[Site(id=1)],
                channels=[Channel(id=2, site_id=1), Channel(id=2, site_id=1)],
            )


class TestChannelLookup:
    def test_channel_is_scoped_to_its_site(self, store):
        assert store.get_channel(1, 101) is None
        assert store.get_channel(100, 101) is not None
        assert not store.channel_exists(1, 101)
        assert store.channel_exists_globally(101)
        assert store.get_owning_site_id(101) == 100
        assert store.get_owning_site_id(9999) == 0

    def test_children(self, store):
        assert store.get_child_by_lowest_taxis(8).id == 10
        assert store.get_child_by_latest_add(11).id == 13
        assert store.get_child_by_latest_add(2) is None


class TestContentLookup:
    def test_table_name_prefers_channel_override(self):
        site = Site(id=1, table_name="site_table")
        store = InMemorySiteStore(
            sites=[site],
            channels=[Channel(id=2, site_id=1, table_name="special_table"), Channel(id=3, site_id=1)],
        )

        assert store.get_content_table_name(site, 2) == "special_table"
        assert store.get_content_table_name(site, store.get_channel(1, 3)) == "site_table"
        assert store.get_content_table_name(Site(id=9), 0) == default_table_name(9)

    def test_field_values(self, store, site1):
        table = store.get_content_table_name(site1, 2)
        store.add_content(
            Content(id=70, channel_id=2, site_id=1, attributes={"Author": "ana"}),
        )

        assert store.get_field_value(table, 21, "link_url") == "http://ext.example"
        assert store.get_field_value(table, 20, "link_url") == ""
        assert store.get_field_value(table, 70, "Author") == "ana"
        assert store.get_field_value(table, 404, "link_url") == ""
        assert store.get_channel_id_of_content(table, 21) == 2
        assert store.get_channel_id_of_content(table, 404) == 0

    @pytest.mark.parametrize(
        ("taxis_type", "expected"),
        [
            (TaxisType.ORDER_BY_TAXIS_DESC, 32),
            (TaxisType.ORDER_BY_TAXIS, 30),
            (TaxisType.ORDER_BY_ID, 30),
            (TaxisType.ORDER_BY_ID_DESC, 32),
        ],
    )
    def test_first_content_id(self, store, site1, taxis_type, expected):
        table = store.get_content_table_name(site1, 3)

        assert store.get_first_content_id(table, 3, taxis_type) == expected

    def test_first_content_by_add_date(self):
        store = InMemorySiteStore(
            sites=[Site(id=1)],
            channels=[Channel(id=2, site_id=1)],
            contents=[
                Content(id=1, channel_id=2, site_id=1, add_date=datetime(2024, 5, 1)),
                Content(id=2, channel_id=2, site_id=1, add_date=datetime(2024, 1, 1)),
                Content(id=3, channel_id=2, site_id=1),
            ],
        )
        table = default_table_name(1)

        assert store.get_first_content_id(table, 2, TaxisType.ORDER_BY_ADD_DATE) == 2
        assert store.get_first_content_id(table, 2, TaxisType.ORDER_BY_ADD_DATE_DESC) == 3
        assert store.get_first_content_id(table, 99, TaxisType.ORDER_BY_ADD_DATE) == 0


class TestTemplates:
    def test_index_template(self, store):
        assert store.index_template_id(1) == 1
        assert store.created_file_full_name(1, 1) == "@/index.html"

    def test_default_index_file(self, store):
        assert store.index_template_id(100) == 0
        assert store.created_file_full_name(100, 0) == "@/index.html"
        assert store.created_file_full_name(100, 5) == ""

    def test_special_url(self, store, site1, site2):
        assert store.special_url(site1, 1) == "@/special/about/"
        assert store.special_url(site2, 1) == ""


class TestFromYaml:
    def test_loads_fixture(self, fixture_file):
        store = InMemorySiteStore.from_yaml(fixture_file)

        assert store.get_site(100).web_url == "http://s2.example.com/"
        assert store.get_channel(1, 13).add_date == datetime(2024, 6, 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FixtureLoadError):
            InMemorySiteStore.from_yaml(tmp_path / "missing.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("sites: [\n", encoding="utf-8")

        with pytest.raises(FixtureLoadError, match="invalid YAML"):
            InMemorySiteStore.from_yaml(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(FixtureLoadError, match="root must be a mapping"):
            InMemorySiteStore.from_yaml(path)

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "record.yml"
        path.write_text("sites:\n  - {id: not-a-number}\n", encoding="utf-8")

        with pytest.raises(FixtureLoadError):
            InMemorySiteStore.from_yaml(path)
