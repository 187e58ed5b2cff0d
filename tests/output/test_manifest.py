"""
Unit tests for the layout manifest.
"""

import json
from pathlib import Path

import pytest

from photoprint_toolkit import __version__
from photoprint_toolkit.intake import SkippedFile
from photoprint_toolkit.layout import pack_photos
from photoprint_toolkit.output import build_manifest, write_manifest


class TestBuildManifest:

    def test_when_built_then_config_and_pages_included(self, letter_config, make_photo):
        layout = pack_photos([make_photo(photo_id="a"), make_photo(photo_id="b")], letter_config)

        manifest = build_manifest(layout, letter_config)

        assert manifest["toolkit_version"] == __version__
        assert manifest["config"]["dpi"] == 96
        assert manifest["config"]["page_width_in"] == 8.5
        placements = manifest["layout"]["pages"][0]["placements"]
        assert [p["photo_id"] for p in placements] == ["a", "b"]
        assert placements[0]["x_in"] == pytest.approx(0.1)
        assert "generated_at" in manifest

    def test_when_dropped_and_skipped_files_then_reported(self, letter_config, make_photo):
        layout = pack_photos([make_photo(photo_id="huge", diagonal=40.0)], letter_config)
        skipped = [SkippedFile(Path("photos/IMG_1.heic"), "HEIC/HEIF decoding is not supported")]

        manifest = build_manifest(layout, letter_config, skipped_files=skipped)

        assert manifest["layout"]["dropped"][0]["photo_id"] == "huge"
        assert manifest["layout"]["warnings"]
        assert manifest["skipped_files"] == [
            {"path": "photos/IMG_1.heic", "reason": "HEIC/HEIF decoding is not supported"},
        ]


class TestWriteManifest:

    def test_when_written_then_valid_json(self, tmp_path, letter_config, make_photo):
        manifest = build_manifest(pack_photos([make_photo()], letter_config), letter_config)

        path = write_manifest(tmp_path / "nested" / "layout.json", manifest)

        with open(path, encoding="utf-8") as f:
            assert json.load(f) == manifest
