"""Tests for site base URLs and the separated-assets rewrite."""

import pytest

from sitelink.config.settings import ResolverSettings
from sitelink.data_primitives.models import Mode, Site
from sitelink.urls.site import SiteUrlResolver


@pytest.fixture
def site_resolver(tmp_path):
    return SiteUrlResolver(ResolverSettings(physical_root=tmp_path))


@pytest.mark.parametrize(
    ("web_url", "expected"),
    [("", "/"), ("/", "/"), ("/site1/", "/site1"), ("https://www.example.com/", "https://www.example.com")],
)
def test_base_url_never_ends_with_slash_unless_root(site_resolver, web_url, expected):
    site = Site(id=1, site_dir="site1", web_url=web_url)

    assert site_resolver.resolve(site, "", Mode.PUBLISHED) == expected


@pytest.mark.parametrize(
    ("relative_path", "expected"),
    [
        ("channels/2.html", "/site1/channels/2.html"),
        ("/channels/2.html", "/site1/channels/2.html"),
        ("\\channels\\2.html", "/site1/channels/2.html"),
        ("chan<nels>/2.html", "/site1/channels/2.html"),
    ],
)
def test_relative_path_is_normalized(site_resolver, relative_path, expected):
    site = Site(id=1, site_dir="site1", web_url="/site1/")

    assert site_resolver.resolve(site, relative_path) == expected


def test_root_site_joins_with_single_slash(site_resolver):
    site = Site(id=1, web_url="/")

    assert site_resolver.resolve(site, "/index.html") == "/index.html"


def test_preview_base_comes_from_site_dir(tmp_path):
    resolver = SiteUrlResolver(ResolverSettings(application_root="/cms/", physical_root=tmp_path))
    site = Site(id=1, site_dir="site1", web_url="https://www.example.com")

    assert resolver.resolve(site, "", Mode.PREVIEW) == "/cms/site1"
    assert resolver.resolve(site, "channels/2.html", Mode.PREVIEW) == "/cms/site1/channels/2.html"


def test_missing_site_degrades_to_root(site_resolver):
    assert site_resolver.resolve(None) == "/"
    assert site_resolver.resolve(None, "a.html") == "/a.html"


class TestSeparatedAssets:
    @pytest.fixture
    def site(self):
        return Site(
            id=1,
            site_dir="site1",
            web_url="/site1",
            is_separated_assets=True,
            assets_dir="assets",
            assets_url="https://cdn.example.com/a1",
        )

    def test_assets_prefix_is_rewritten(self, site_resolver, site):
        url = site_resolver.resolve(site, "assets/img/logo.png")

        assert url == "https://cdn.example.com/a1/img/logo.png"

    def test_rewrite_is_case_insensitive(self, site_resolver, site):
        url = site_resolver.resolve(site, "ASSETS/img/logo.png")

        assert url == "https://cdn.example.com/a1/img/logo.png"

    def test_pages_are_not_rewritten(self, site_resolver, site):
        assert site_resolver.resolve(site, "channels/2.html") == "/site1/channels/2.html"

    def test_preview_mode_is_not_rewritten(self, site_resolver, site):
        assert site_resolver.resolve(site, "assets/img/logo.png", Mode.PREVIEW) == "/site1/assets/img/logo.png"

    def test_empty_assets_url_keeps_path_on_same_host(self, site_resolver, site):
        bare = site.model_copy(update={"assets_url": ""})

        assert site_resolver.resolve(bare, "assets/img/logo.png") == "/img/logo.png"

    def test_trailing_slash_on_assets_url(self, site_resolver, site):
        slashed = site.model_copy(update={"assets_url": "https://cdn.example.com/a1/"})

        assert site_resolver.resolve(slashed, "assets/img/logo.png") == "https://cdn.example.com/a1/img/logo.png"

    def test_without_separation_flag_nothing_changes(self, site_resolver, site):
        plain = site.model_copy(update={"is_separated_assets": False})

        assert site_resolver.resolve(plain, "assets/img/logo.png") == "/site1/assets/img/logo.png"


class TestPhysicalPath:
    def test_file_under_site_directory(self, site_resolver, tmp_path):
        site = Site(id=1, site_dir="site1", web_url="/site1")

        url = site_resolver.resolve_by_physical_path(site, tmp_path / "site1" / "channels" / "2.html")

        assert url == "/site1/channels/2.html"

    def test_file_outside_site_directory_maps_to_base(self, site_resolver, tmp_path):
        site = Site(id=1, site_dir="site1", web_url="/site1")

        assert site_resolver.resolve_by_physical_path(site, tmp_path / "elsewhere" / "a.html") == "/site1"

    def test_empty_physical_path_returns_web_url(self, site_resolver):
        site = Site(id=1, site_dir="site1", web_url="/site1/")

        assert site_resolver.resolve_by_physical_path(site, "") == "/site1/"
