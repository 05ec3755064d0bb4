"""
Shared helper functions for catalog CLI commands.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import click
import yaml

from ..catalog import CatalogService, ViewPage
from ..catalog.models import AssetRecord, CatalogView
from ..core.config import Config

logger = logging.getLogger(__name__)

_TABLE_COLUMNS = (("Title", 40), ("Author", 20), ("Category", 16), ("Created", 10))


def _load_config(config_path: Optional[str]) -> Config:
    """Config from a YAML file when given, else from AB_* variables."""
    if config_path:
        return Config.from_file(config_path)
    return Config.from_env()


def _format_date(millis: int) -> str:
    if not millis:
        return "-"
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).strftime("%Y-%m-%d")


def _truncate(text: str, width: int) -> str:
    text = (text or "").replace("\n", " ")
    return text if len(text) <= width else text[: width - 1] + "…"


def _record_to_dict(record: AssetRecord, catalog: CatalogService) -> Dict[str, Any]:
    return {
        "id": record.record_id,
        "source": record.source.value,
        "title": record.title,
        "author": record.author,
        "category": record.category_name,
        "created_at": record.created_at_epoch_millis,
        "tags": list(record.tags),
        "supported_avatars": list(catalog.supported_avatar_names(record)),
        "memo": record.memo,
        "image": record.image,
        "booth_id": record.external_id,
    }


def _format_page(page: ViewPage, catalog: CatalogService, format: str = "table") -> str:
    """Format one view page for display."""
    if format in ("json", "yaml"):
        page_data = {
            "view": page.view.value,
            "page": page.page_index + 1,
            "total_pages": page.total_pages,
            "total_count": page.total_count,
            "records": [_record_to_dict(r, catalog) for r in page.records],
        }
        if format == "json":
            return json.dumps(page_data, indent=2, ensure_ascii=False)
        return yaml.dump(page_data, default_flow_style=False, allow_unicode=True)

    lines: List[str] = []
    lines.append("  ".join(name.ljust(width) for name, width in _TABLE_COLUMNS))
    lines.append("  ".join("-" * width for _, width in _TABLE_COLUMNS))
    for record in page.records:
        row = (
            record.title,
            record.author,
            record.category_name,
            _format_date(record.created_at_epoch_millis),
        )
        lines.append(
            "  ".join(
                _truncate(value, width).ljust(width)
                for value, (_, width) in zip(row, _TABLE_COLUMNS)
            )
        )
    if not page.records:
        lines.append("No records found.")
    lines.append("")
    lines.append(
        f"{page.view.value}: page {page.page_index + 1}/{page.total_pages} "
        f"({page.total_count} records)"
    )
    return "\n".join(lines)


def _format_stats(
    counts: Dict[CatalogView, int], report: Dict[str, Any], format: str = "table"
) -> str:
    stats = {
        "views": {view.value: count for view, count in counts.items()},
        "load": report,
    }
    if format == "json":
        return json.dumps(stats, indent=2, ensure_ascii=False)
    if format == "yaml":
        return yaml.dump(stats, default_flow_style=False, allow_unicode=True)

    lines = ["Catalog Statistics", "=" * 40]
    for view, count in counts.items():
        lines.append(f"{view.value:<16}{count:>8}")
    lines.append("")
    lines.append(f"Loaded:  {report['total_loaded']}")
    lines.append(f"Skipped: {report['total_skipped']}")
    for name, source in report["sources"].items():
        status = "available" if source["available"] else "absent"
        lines.append(
            f"  {name:<24}{status:<10}{source['loaded']:>6} loaded "
            f"{source['skipped']:>4} skipped"
        )
    return "\n".join(lines)


def _echo_error(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    logger.debug(message)
