"""Tests for the media kind classifier."""

from __future__ import annotations

from pathlib import Path

import pytest

from mg_app.core.file_types import FileTypeTable
from mg_app.core.media_types import (
    ALL_VALID,
    PHOTOS,
    SOUNDS,
    VIDEOS,
    MediaKind,
    classify_content_type,
    classify_path,
    content_types,
    is_photo,
    is_previewable_photo,
    is_readable_photo,
    is_sound,
    is_video,
    supports_metadata_extraction,
)


class TestContentTypeCache:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            (MediaKind.BMP, "image/bmp"),
            (MediaKind.GIF, "image/gif"),
            (MediaKind.PNG, "image/png"),
            (MediaKind.JPG, "image/jpeg"),
            (MediaKind.TIFF, "image/tiff"),
            (MediaKind.MP4, "video/mp4"),
            (MediaKind.FLV, "video/x-flv"),
            (MediaKind.MP3, "audio/mpeg"),
        ],
    )
    def test_canonical_content_type(self, kind: MediaKind, expected: str) -> None:
        assert kind.content_type == expected

    def test_every_kind_round_trips(self) -> None:
        for kind in ALL_VALID:
            assert classify_content_type(kind.content_type) is kind

    def test_cache_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            content_types()[MediaKind.PNG] = "image/x-png"  # type: ignore[index]


class TestGroups:
    def test_groups_are_disjoint(self) -> None:
        assert not PHOTOS & VIDEOS
        assert not PHOTOS & SOUNDS
        assert not VIDEOS & SOUNDS

    def test_groups_cover_all_valid(self) -> None:
        assert PHOTOS | VIDEOS | SOUNDS == ALL_VALID
        assert len(ALL_VALID) == 8

    def test_exactly_one_group_per_kind(self) -> None:
        for kind in ALL_VALID:
            assert [is_photo(kind), is_video(kind), is_sound(kind)].count(True) == 1


class TestClassifyContentType:
    @pytest.mark.parametrize("value", [None, ""])
    def test_undefined_is_unrecognized(self, value) -> None:
        assert classify_content_type(value) is None

    def test_legacy_pjpeg_maps_to_jpg(self) -> None:
        assert classify_content_type("image/pjpeg") is MediaKind.JPG

    def test_unknown_is_unrecognized(self) -> None:
        assert classify_content_type("application/x-bogus") is None

    def test_match_is_case_sensitive(self) -> None:
        assert classify_content_type("IMAGE/PNG") is None

    def test_no_parameter_matching(self) -> None:
        assert classify_content_type("image/png; charset=binary") is None

    def test_png_scenario(self) -> None:
        kind = classify_content_type("image/png")
        assert kind is MediaKind.PNG
        assert is_photo(kind)
        assert is_readable_photo(kind)

    def test_mp4_scenario(self) -> None:
        kind = classify_content_type("video/mp4")
        assert kind is MediaKind.MP4
        assert is_video(kind)
        assert not is_photo(kind)

    def test_mp3_scenario(self) -> None:
        kind = classify_content_type("audio/mpeg")
        assert kind is MediaKind.MP3
        assert is_sound(kind)

    def test_tiff_scenario(self) -> None:
        kind = classify_content_type("image/tiff")
        assert kind is MediaKind.TIFF
        assert not is_readable_photo(kind)
        assert supports_metadata_extraction(kind)

    def test_text_plain_scenario(self) -> None:
        kind = classify_content_type("text/plain")
        assert kind is None
        assert not is_photo(kind)
        assert not is_video(kind)
        assert not is_sound(kind)


class TestClassifyPath:
    def test_none_path_is_unrecognized(self) -> None:
        assert classify_path(None) is None

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("holiday.JPG", MediaKind.JPG),
            ("holiday.jpeg", MediaKind.JPG),
            ("scan.tif", MediaKind.TIFF),
            ("clip.flv", MediaKind.FLV),
            ("song.mp3", MediaKind.MP3),
            ("/srv/gallery/album/icon.bmp", MediaKind.BMP),
        ],
    )
    def test_by_extension(self, name: str, expected: MediaKind) -> None:
        assert classify_path(name) is expected
        assert classify_path(Path(name)) is expected

    @pytest.mark.parametrize("name", ["photo.webp", "notes.txt", "README", "archive.tar.gz", ""])
    def test_unsupported_extensions(self, name: str) -> None:
        assert classify_path(name) is None

    def test_custom_table(self) -> None:
        table = FileTypeTable({".gjpg": "image/jpeg"})
        assert classify_path("portrait.gjpg", table) is MediaKind.JPG
        assert classify_path("portrait.gjpg") is None


class TestCapabilities:
    def test_readable_photos(self) -> None:
        readable = {k for k in ALL_VALID if is_readable_photo(k)}
        assert readable == {MediaKind.GIF, MediaKind.JPG, MediaKind.PNG, MediaKind.BMP}

    def test_previewable_matches_readable(self) -> None:
        for kind in [*ALL_VALID, None]:
            assert is_previewable_photo(kind) == is_readable_photo(kind)

    def test_metadata_capable(self) -> None:
        capable = {k for k in ALL_VALID if supports_metadata_extraction(k)}
        assert capable == {MediaKind.GIF, MediaKind.JPG, MediaKind.TIFF}

    def test_tiff_flags_diverge(self) -> None:
        assert not is_readable_photo(MediaKind.TIFF)
        assert supports_metadata_extraction(MediaKind.TIFF)

    def test_unrecognized_has_no_capability(self) -> None:
        assert not is_readable_photo(None)
        assert not is_previewable_photo(None)
        assert not supports_metadata_extraction(None)
