"""
Tests for the source database loaders.
"""

from pathlib import Path

import pytest

from asset_browser.catalog.loaders import (
    LoadReport,
    load_avatar_tool_database,
    load_curated_database,
)
from asset_browser.catalog.models import AvatarToolType, CuratedWearableItem
from asset_browser.core.exceptions import SourceLoadError
from conftest import FOX_PATH, avatar_explorer_entries, write_json


class TestAvatarExplorerLoader:
    """Test reading ItemsData.json."""

    def test_load(self, avatar_explorer_dir: Path) -> None:
        report = LoadReport()
        record_set = load_avatar_tool_database(avatar_explorer_dir, report)

        fox, hat, garden = record_set.items
        assert fox.title == "Fox"
        assert fox.item_type == AvatarToolType.AVATAR
        assert fox.booth_id == 1234
        assert fox.created_at_epoch_millis == 1700000000000
        assert hat.supported_avatar_paths == (FOX_PATH,)
        assert hat.has_valid_created_date
        assert garden.booth_id == -1
        assert garden.is_world_related

        source = report.sources["avatar_tool"]
        assert source.available
        assert source.loaded == 3
        assert source.skipped == 0

    def test_invalid_entries_are_skipped(self, tmp_path: Path) -> None:
        entries = avatar_explorer_entries()
        entries.insert(1, {"AuthorName": "no title"})
        entries.append("not an object")
        entries.append({"Title": "Bad booth", "BoothId": "abc"})
        write_json(tmp_path / "ItemsData.json", entries)

        report = LoadReport()
        record_set = load_avatar_tool_database(tmp_path, report)

        assert [i.title for i in record_set] == ["Fox", "Hat", "Sky Garden"]
        assert report.total_skipped == 3
        assert len(report.sources["avatar_tool"].errors) == 3

    def test_numeric_and_null_fields(self, tmp_path: Path) -> None:
        write_json(
            tmp_path / "ItemsData.json",
            [{"Title": None, "Type": 0, "SupportedAvatar": None, "CreatedDate": None}],
        )
        (item,) = load_avatar_tool_database(tmp_path).items
        assert item.title == ""
        assert item.item_type == AvatarToolType.AVATAR
        assert item.supported_avatar_paths == ()
        assert item.created_at_epoch_millis == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceLoadError) as exc_info:
            load_avatar_tool_database(tmp_path)
        assert exc_info.value.details["source"] == "avatar_tool"

    def test_corrupt_file(self, tmp_path: Path) -> None:
        (tmp_path / "ItemsData.json").write_text("[{", encoding="utf-8")
        with pytest.raises(SourceLoadError):
            load_avatar_tool_database(tmp_path)

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        (tmp_path / "ItemsData.json").write_bytes(b'[{"Title": "\xff\xfe bad"}]')
        with pytest.raises(SourceLoadError) as exc_info:
            load_avatar_tool_database(tmp_path)
        assert exc_info.value.details["source"] == "avatar_tool"

    def test_not_an_array(self, tmp_path: Path) -> None:
        write_json(tmp_path / "ItemsData.json", {"Title": "Fox"})
        with pytest.raises(SourceLoadError):
            load_avatar_tool_database(tmp_path)

    def test_byte_order_mark(self, tmp_path: Path) -> None:
        (tmp_path / "ItemsData.json").write_text('[{"Title": "Fox"}]', encoding="utf-8-sig")
        assert len(load_avatar_tool_database(tmp_path)) == 1


class TestKonoAssetLoader:
    """Test reading the metadata stores."""

    def test_load(self, kono_asset_dir: Path) -> None:
        report = LoadReport()
        record_set = load_curated_database(kono_asset_dir, report)

        (usagi,) = record_set.avatars
        assert usagi.title == "Usagi"
        assert usagi.description.image_filename == "usagi.png"
        assert usagi.external_id == 42
        assert usagi.memo == ""

        (wearable,) = record_set.wearables
        assert isinstance(wearable, CuratedWearableItem)
        assert wearable.category_name == "Hats"
        assert wearable.supported_avatars == ("Usagi",)

        assert record_set.world_objects is None
        assert report.sources["curated.world_objects"].available is False
        assert report.total_loaded == 2

    def test_missing_metadata_directory(self, tmp_path: Path) -> None:
        with pytest.raises(SourceLoadError):
            load_curated_database(tmp_path)

    def test_invalid_entries_are_skipped(self, tmp_path: Path) -> None:
        write_json(
            tmp_path / "metadata" / "worldObjects.json",
            {
                "version": 1,
                "data": [
                    {"id": "o-1", "description": {"name": "Lantern"}, "category": "Light"},
                    {"id": "o-2"},
                    {"description": {"name": "No id"}},
                ],
            },
        )
        report = LoadReport()
        record_set = load_curated_database(tmp_path, report)

        assert [o.title for o in record_set.world_objects] == ["Lantern"]
        assert report.sources["curated.world_objects"].skipped == 2
        assert record_set.avatars is None

    def test_store_without_data_array(self, tmp_path: Path) -> None:
        write_json(tmp_path / "metadata" / "avatars.json", {"version": 1})
        report = LoadReport()
        record_set = load_curated_database(tmp_path, report)
        assert record_set.avatars is None
        assert report.sources["curated.avatars"].errors

    def test_corrupt_store_is_absent(self, tmp_path: Path) -> None:
        metadata = tmp_path / "metadata"
        metadata.mkdir()
        (metadata / "avatars.json").write_text("{not json", encoding="utf-8")
        report = LoadReport()
        assert load_curated_database(tmp_path, report).avatars is None
        assert report.sources["curated.avatars"].errors

    def test_non_utf8_store_is_absent(self, kono_asset_dir: Path) -> None:
        (kono_asset_dir / "metadata" / "avatars.json").write_bytes(
            b'{"version": 1, "data": [{"\xff"}]}'
        )
        report = LoadReport()
        record_set = load_curated_database(kono_asset_dir, report)

        assert record_set.avatars is None
        assert report.sources["curated.avatars"].available is False
        assert [w.title for w in record_set.wearables] == ["Red Hat Classic"]

    def test_report_to_dict(self, kono_asset_dir: Path) -> None:
        report = LoadReport()
        load_curated_database(kono_asset_dir, report)
        data = report.to_dict()
        assert data["total_loaded"] == 2
        assert data["sources"]["curated.avatars"]["loaded"] == 1
