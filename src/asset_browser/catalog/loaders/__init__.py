"""
Source database loaders.

Turns the on-disk AvatarExplorer and KonoAsset databases into record sets for
the catalog.
"""

from .avatar_explorer import load_avatar_tool_database
from .kono_asset import load_curated_database
from .report import LoadReport, SourceReport

__all__ = [
    "LoadReport",
    "SourceReport",
    "load_avatar_tool_database",
    "load_curated_database",
]
