"""
Pytest configuration and fixtures for the Asset Browser.
Only external I/O (the source database files) is faked, using tmp_path.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from asset_browser.catalog import CatalogService
from asset_browser.catalog.models import (
    AvatarToolItem,
    AvatarToolRecordSet,
    AvatarToolType,
    CuratedAvatarItem,
    CuratedRecordSet,
    CuratedWearableItem,
    CuratedWorldObjectItem,
    Description,
)
from asset_browser.core.config import Config, Environment

FOX_PATH = "Datas\\Items\\Fox"


def make_avatar_tool_item(
    title: str,
    item_type: AvatarToolType = AvatarToolType.CLOTHING,
    **kwargs: Any,
) -> AvatarToolItem:
    kwargs.setdefault("item_path", f"Datas\\Items\\{title}")
    return AvatarToolItem(title=title, item_type=item_type, **kwargs)


def make_description(name: str, **kwargs: Any) -> Description:
    return Description(name=name, **kwargs)


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def test_config() -> Config:
    return Config(environment=Environment.TESTING)


@pytest.fixture
def fox() -> AvatarToolItem:
    return make_avatar_tool_item(
        "Fox",
        AvatarToolType.AVATAR,
        item_path=FOX_PATH,
        author_name="Kitsune Works",
        created_date="1700000000000",
    )


@pytest.fixture
def hat() -> AvatarToolItem:
    return make_avatar_tool_item(
        "Hat",
        AvatarToolType.CUSTOM,
        custom_category="Tops",
        author_name="Acme",
        supported_avatar_paths=(FOX_PATH,),
        created_date="1710000000000",
    )


@pytest.fixture
def fox_and_hat(fox: AvatarToolItem, hat: AvatarToolItem) -> AvatarToolRecordSet:
    return AvatarToolRecordSet.of([fox, hat])


@pytest.fixture
def curated_records() -> CuratedRecordSet:
    return CuratedRecordSet.of(
        avatars=[
            CuratedAvatarItem(
                id="a-1",
                description=make_description(
                    "Usagi", creator="Moon Lab", tags=("bunny",), created_at=1600000000000
                ),
            )
        ],
        wearables=[
            CuratedWearableItem(
                id="w-1",
                description=make_description(
                    "Red Hat Classic",
                    creator="Acme",
                    tags=("hat", "red"),
                    memo="limited edition",
                    created_at=1650000000000,
                ),
                category="Hats",
                supported_avatars=("Usagi", "Fox"),
            )
        ],
        world_objects=[
            CuratedWorldObjectItem(
                id="o-1",
                description=make_description(
                    "Lantern", creator="Light Co", created_at=1660000000000
                ),
                category="Lighting",
            )
        ],
    )


@pytest.fixture
def loaded_catalog(
    fox_and_hat: AvatarToolRecordSet, curated_records: CuratedRecordSet
) -> CatalogService:
    catalog = CatalogService()
    catalog.load(fox_and_hat, curated_records)
    return catalog


def avatar_explorer_entries() -> List[Dict[str, Any]]:
    return [
        {
            "Title": "Fox",
            "AuthorName": "Kitsune Works",
            "ItemMemo": "",
            "ItemPath": FOX_PATH,
            "ImagePath": "",
            "MaterialPath": "",
            "SupportedAvatar": [],
            "BoothId": 1234,
            "Type": "0",
            "CustomCategory": "",
            "AuthorId": "kitsune",
            "ThumbnailUrl": "",
            "CreatedDate": "1700000000000",
        },
        {
            "Title": "Hat",
            "AuthorName": "Acme",
            "ItemPath": "Datas\\Items\\Hat",
            "SupportedAvatar": [FOX_PATH],
            "Type": "1",
            "CreatedDate": "2024/03/09 12:00:00",
        },
        {
            "Title": "Sky Garden",
            "AuthorName": "World Smith",
            "ItemPath": "Datas\\Items\\Sky Garden",
            "Type": "9",
            "CustomCategory": "ワールド素材",
            "BoothId": None,
        },
    ]


@pytest.fixture
def avatar_explorer_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "AvatarExplorer" / "Datas"
    write_json(directory / "ItemsData.json", avatar_explorer_entries())
    return directory


@pytest.fixture
def kono_asset_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "KonoAsset"
    metadata = directory / "metadata"
    write_json(
        metadata / "avatars.json",
        {
            "version": 1,
            "data": [
                {
                    "id": "a-1",
                    "description": {
                        "name": "Usagi",
                        "creator": "Moon Lab",
                        "imageFilename": "usagi.png",
                        "tags": ["bunny"],
                        "memo": None,
                        "boothItemId": 42,
                        "dependencies": [],
                        "createdAt": 1600000000000,
                        "publishedAt": None,
                    },
                }
            ],
        },
    )
    write_json(
        metadata / "avatarWearables.json",
        {
            "version": 1,
            "data": [
                {
                    "id": "w-1",
                    "description": {
                        "name": "Red Hat Classic",
                        "creator": "Acme",
                        "tags": ["hat"],
                        "createdAt": 1650000000000,
                    },
                    "category": "Hats",
                    "supportedAvatars": ["Usagi"],
                }
            ],
        },
    )
    return directory
