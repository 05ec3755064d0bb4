"""
Catalog browsing commands for the Asset Browser CLI.
"""

import logging
from typing import Optional

import click

from ..catalog import BrowserSession, CatalogService, SearchCriteria
from ..catalog.models import CatalogView, SortMethod
from ..core.exceptions import AssetBrowserError
from .helpers import _echo_error, _format_page, _format_stats

logger = logging.getLogger(__name__)

_source_options = [
    click.option(
        "--ae-dir",
        type=click.Path(file_okay=False),
        help="AvatarExplorer database directory (holds ItemsData.json)",
    ),
    click.option(
        "--ka-dir",
        type=click.Path(file_okay=False),
        help="KonoAsset data directory (holds metadata/)",
    ),
]


def source_options(func):
    for option in reversed(_source_options):
        func = option(func)
    return func


def _load_catalog(
    ctx: click.Context, ae_dir: Optional[str], ka_dir: Optional[str]
) -> CatalogService:
    """Catalog loaded from the given directories, falling back to config."""
    config = ctx.obj["config"]
    avatar_tool_dir = ae_dir or config.sources.avatar_tool_dir
    curated_dir = ka_dir or config.sources.curated_dir
    if avatar_tool_dir is None and curated_dir is None:
        _echo_error("No source directory given (use --ae-dir and/or --ka-dir)")
        raise click.Abort()

    catalog = CatalogService.from_config(config)
    try:
        report = catalog.load_from_directories(avatar_tool_dir, curated_dir)
    except AssetBrowserError as e:
        _echo_error(str(e))
        raise click.Abort()

    ctx.obj["report"] = report
    return catalog


@click.command(name="list")
@source_options
@click.option(
    "--view",
    type=click.Choice([v.value for v in CatalogView]),
    default=None,
    help="Catalog view to list",
)
@click.option("--query", "-q", default="", help="Keywords matched against any field")
@click.option("--title", default="", help="Advanced: title keywords")
@click.option("--author", default="", help="Advanced: author keywords")
@click.option("--category", default="", help="Advanced: category keywords")
@click.option(
    "--supported-avatar", default="", help="Advanced: supported avatar keywords"
)
@click.option("--tag", default="", help="Advanced: tag keywords")
@click.option("--memo", default="", help="Advanced: memo keywords")
@click.option(
    "--sort",
    type=click.Choice([m.value for m in SortMethod]),
    default=None,
    help="Sort method",
)
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number")
@click.option(
    "--page-size", type=click.IntRange(min=1), default=None, help="Records per page"
)
@click.option(
    "--format",
    type=click.Choice(["table", "json", "yaml"]),
    default="table",
    help="Output format",
)
@click.pass_context
def list_records(
    ctx: click.Context,
    ae_dir: Optional[str],
    ka_dir: Optional[str],
    view: Optional[str],
    query: str,
    title: str,
    author: str,
    category: str,
    supported_avatar: str,
    tag: str,
    memo: str,
    sort: Optional[str],
    page: int,
    page_size: Optional[int],
    format: str,
) -> None:
    """List one page of a catalog view."""
    config = ctx.obj["config"]
    catalog = _load_catalog(ctx, ae_dir, ka_dir)

    session = BrowserSession.from_config(catalog, config)
    if view:
        session.set_view(view)
    if sort:
        session.set_sort_method(sort)
    if page_size:
        session.set_page_size(page_size)

    advanced_terms = {
        "title": title,
        "author": author,
        "category": category,
        "supported_avatars": supported_avatar,
        "tags": tag,
        "memo": memo,
    }
    session.set_criteria(
        SearchCriteria(
            query=query,
            show_advanced=any(advanced_terms.values()),
            **advanced_terms,
        )
    )

    if page > 1 and not session.go_to_page(page - 1):
        _echo_error(f"Page {page} is out of range")
        raise click.Abort()

    click.echo(_format_page(session.current_page(), catalog, format))


@click.command()
@source_options
@click.option("--query", "-q", default="", help="Count only records matching keywords")
@click.option(
    "--format",
    type=click.Choice(["table", "json", "yaml"]),
    default="table",
    help="Output format",
)
@click.pass_context
def stats(
    ctx: click.Context,
    ae_dir: Optional[str],
    ka_dir: Optional[str],
    query: str,
    format: str,
) -> None:
    """Show record counts per view and what the load read."""
    catalog = _load_catalog(ctx, ae_dir, ka_dir)
    counts = catalog.view_counts(SearchCriteria(query=query))
    click.echo(_format_stats(counts, ctx.obj["report"].to_dict(), format))
