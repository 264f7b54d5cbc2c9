"""Main Typer application for sitelink."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from sitelink.cli.errorhandler import handle_cli_errors
from sitelink.config import SitelinkConfig
from sitelink.data_primitives.models import Mode, Site
from sitelink.exceptions import UnknownEntityError
from sitelink.infra.memory_store import InMemorySiteStore
from sitelink.logging_setup import configure_logging
from sitelink.urls.engine import UrlResolver

logger = logging.getLogger(__name__)
console = Console()

app = typer.Typer(
    name="sitelink",
    help="Resolve published and preview URLs of sites, channels and contents.",
    no_args_is_help=True,
)

FixtureArg = Annotated[
    Path,
    typer.Argument(help="YAML fixture describing sites, channels and contents", exists=True, dir_okay=False),
]
SiteIdOpt = Annotated[int, typer.Option("--site-id", "-s", help="Site identifier")]
PreviewOpt = Annotated[bool, typer.Option("--preview", help="Resolve preview-mode URLs")]
ConfigRootOpt = Annotated[
    Path | None,
    typer.Option("--config-root", help="Directory containing .sitelink.toml (default: cwd)"),
]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Verbose logging and full tracebacks")]


@dataclass(frozen=True, slots=True)
class _Session:
    resolver: UrlResolver
    store: InMemorySiteStore
    site: Site


def _open(fixture: Path, site_id: int, config_root: Path | None, debug: bool) -> _Session:
    configure_logging(debug=debug)
    config = SitelinkConfig.load(config_root)
    store = InMemorySiteStore.from_yaml(fixture)
    site = store.get_site(site_id)
    if site is None:
        raise UnknownEntityError("site", site_id)
    return _Session(resolver=UrlResolver(store, config=config), store=store, site=site)


def _mode(preview: bool) -> Mode:
    return Mode.PREVIEW if preview else Mode.PUBLISHED


def _emit(url: str) -> None:
    console.print(url, markup=False, highlight=False, soft_wrap=True)


@app.command()
def site(
    fixture: FixtureArg,
    site_id: SiteIdOpt,
    path: Annotated[str, typer.Option("--path", "-p", help="Path relative to the site root")] = "",
    preview: PreviewOpt = False,
    config_root: ConfigRootOpt = None,
    debug: DebugOpt = False,
) -> None:
    """Print a site's base URL, optionally joined with a relative path."""
    with handle_cli_errors(debug=debug):
        session = _open(fixture, site_id, config_root, debug)
        _emit(session.resolver.site_url(session.site, path, _mode(preview)))


@app.command()
def channel(
    fixture: FixtureArg,
    site_id: SiteIdOpt,
    channel_id: Annotated[int, typer.Option("--channel-id", "-c", help="Channel identifier")],
    preview: PreviewOpt = False,
    input_url: Annotated[
        bool,
        typer.Option("--input", help="Print the site-relative form used by editing forms"),
    ] = False,
    config_root: ConfigRootOpt = None,
    debug: DebugOpt = False,
) -> None:
    """Print the URL a channel links to, after applying its routing policy."""
    with handle_cli_errors(debug=debug):
        session = _open(fixture, site_id, config_root, debug)
        record = session.store.get_channel(session.site.id, channel_id)
        if record is None:
            raise UnknownEntityError("channel", channel_id)
        if input_url:
            _emit(session.resolver.input_channel_url(session.site, record, _mode(preview)))
        else:
            _emit(session.resolver.channel_url(session.site, record, _mode(preview)))


@app.command()
def content(
    fixture: FixtureArg,
    site_id: SiteIdOpt,
    channel_id: Annotated[int, typer.Option("--channel-id", "-c", help="Owning channel identifier")],
    content_id: Annotated[int, typer.Option("--content-id", "-i", help="Content identifier")],
    preview: PreviewOpt = False,
    config_root: ConfigRootOpt = None,
    debug: DebugOpt = False,
) -> None:
    """Print the URL of a content item, following references and sources."""
    with handle_cli_errors(debug=debug):
        session = _open(fixture, site_id, config_root, debug)
        _emit(session.resolver.content_url_by_id(session.site, channel_id, content_id, _mode(preview)))


@app.command()
def navigate(
    fixture: FixtureArg,
    site_id: SiteIdOpt,
    path: Annotated[str, typer.Argument(help="Path using @/ (site) or ~/ (application) notation")],
    add_prefix: Annotated[
        bool,
        typer.Option("--add-prefix", help="Treat bare relative paths as site-relative"),
    ] = False,
    preview: PreviewOpt = False,
    config_root: ConfigRootOpt = None,
    debug: DebugOpt = False,
) -> None:
    """Expand a virtual path into a URL."""
    with handle_cli_errors(debug=debug):
        session = _open(fixture, site_id, config_root, debug)
        _emit(session.resolver.navigation_url(session.site, path, _mode(preview), add_prefix=add_prefix))


@app.command()
def virtual(
    fixture: FixtureArg,
    site_id: SiteIdOpt,
    url: Annotated[str, typer.Argument(help="Absolute URL under the site's web URL")],
    config_root: ConfigRootOpt = None,
    debug: DebugOpt = False,
) -> None:
    """Rewrite a published URL back into @/ notation."""
    with handle_cli_errors(debug=debug):
        session = _open(fixture, site_id, config_root, debug)
        _emit(session.resolver.virtual_url(session.site, url))


def main() -> None:
    app()
