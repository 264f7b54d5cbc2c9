"""Tests for the UrlResolver facade: requests by identifier and template pages."""

import pytest

from sitelink.data_primitives.models import EntityKind, Mode, ResolutionRequest

UNCLICKABLE = "javascript:;"


class TestResolveRequest:
    def test_channel_request(self, resolver):
        request = ResolutionRequest(kind=EntityKind.CHANNEL, entity_id=3, site_id=1)

        assert resolver.resolve(request) == "/site1/contents/3/32.html"

    def test_content_request_with_channel(self, resolver):
        request = ResolutionRequest(kind=EntityKind.CONTENT, entity_id=24, site_id=1, channel_id=2)

        assert resolver.resolve(request) == "http://s2.example.com/contents/101/200.html"

    def test_content_request_without_channel_uses_site_table(self, resolver):
        request = ResolutionRequest(kind=EntityKind.CONTENT, entity_id=20, site_id=1)

        assert resolver.resolve(request) == "/site1/contents/2/20.html"

    def test_preview_request(self, resolver):
        request = ResolutionRequest(kind=EntityKind.CHANNEL, entity_id=3, site_id=1, mode=Mode.PREVIEW)

        assert resolver.resolve(request) == "/api/preview/1?channelId=3"

    @pytest.mark.parametrize(
        "request_",
        [
            ResolutionRequest(kind=EntityKind.CHANNEL, entity_id=3, site_id=42),
            ResolutionRequest(kind=EntityKind.CHANNEL, entity_id=101, site_id=1),
            ResolutionRequest(kind=EntityKind.CONTENT, entity_id=404, site_id=1, channel_id=2),
        ],
    )
    def test_unknown_entities_are_unclickable(self, resolver, request_):
        assert resolver.resolve(request_) == UNCLICKABLE


class TestPages:
    def test_index_page(self, resolver, site1):
        assert resolver.index_page_url(site1) == "/site1/index.html"
        assert resolver.index_page_url(site1, Mode.PREVIEW) == "/api/preview/1"

    def test_file_template(self, resolver, site1):
        assert resolver.file_url(site1, 2) == "/site1/sitemap.xml"
        assert resolver.file_url(site1, 2, Mode.PREVIEW) == "/api/preview/1?fileTemplateId=2"

    def test_special_page(self, resolver, site1):
        assert resolver.special_url(site1, 1) == "/site1/special/about/"
        assert resolver.special_url(site1, 1, Mode.PREVIEW) == "/api/preview/1?specialId=1"


def test_site_and_navigation_shortcuts(resolver, site1, tmp_path):
    assert resolver.site_url(site1) == "/site1"
    assert resolver.site_url(site1, "a/b.html") == "/site1/a/b.html"
    assert resolver.site_url_by_physical_path(site1, tmp_path / "site1" / "a.html") == "/site1/a.html"
    assert resolver.navigation_url(site1, "about.html", add_prefix=True) == "/site1/about.html"
    assert resolver.virtual_url(site1, "/site1/about.html") == "@/about.html"


@pytest.mark.parametrize("channel_id", [1, 2, 3, 5, 8, 11, 17])
def test_channel_resolution_is_idempotent(resolver, store, site1, channel_id):
    channel = store.get_channel(site1.id, channel_id)

    assert resolver.channel_url(site1, channel) == resolver.channel_url(site1, channel)
