"""Smoke tests for the Typer CLI."""

from __future__ import annotations

from pathlib import Path

from conftest import iptc_datasets, jpeg_bytes, with_iptc
from typer.testing import CliRunner

from mg_app.cli import app

runner = CliRunner()


class TestClassifyCommands:
    def test_type(self) -> None:
        result = runner.invoke(app, ["classify", "type", "image/png", "text/plain"])
        assert result.exit_code == 0, result.output
        assert "png" in result.output
        assert "unrecognized" in result.output

    def test_file(self) -> None:
        result = runner.invoke(app, ["classify", "file", "clip.flv"])
        assert result.exit_code == 0, result.output
        assert "flv" in result.output

    def test_scan(self, media_root: Path) -> None:
        result = runner.invoke(app, ["classify", "scan", str(media_root)])
        assert result.exit_code == 0, result.output
        assert "Scanned 9 file(s), 8 recognized." in result.output

    def test_scan_missing_root(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["classify", "scan", str(tmp_path / "nope")])
        assert result.exit_code != 0


class TestMetadataCommands:
    def test_show(self, tmp_path: Path) -> None:
        path = tmp_path / "tagged.jpg"
        path.write_bytes(with_iptc(jpeg_bytes(), iptc_datasets({(2, 90): b"Lyon"})))
        result = runner.invoke(app, ["metadata", "show", str(path)])
        assert result.exit_code == 0, result.output
        assert "Lyon" in result.output

    def test_unsupported(self, media_root: Path) -> None:
        result = runner.invoke(app, ["metadata", "show", str(media_root / "a.png")])
        assert result.exit_code == 1
        assert "UnsupportedMedia" in result.output


class TestPreviewCommands:
    def test_generate_and_resolve(self, media_root: Path, preview_root: Path) -> None:
        result = runner.invoke(
            app,
            [
                "preview",
                "generate",
                str(media_root),
                "--preview-root",
                str(preview_root),
                "--size",
                "100x100",
                "--apply",
            ],
        )
        assert result.exit_code == 0, result.output
        assert (preview_root / "a.png_100x100.jpeg").is_file()

        result = runner.invoke(
            app,
            [
                "preview",
                "resolve",
                "a.png",
                "--size",
                "100x100",
                "--media-root",
                str(media_root),
                "--preview-root",
                str(preview_root),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "image/jpeg" in result.output

    def test_plan_declined(self, media_root: Path, preview_root: Path) -> None:
        result = runner.invoke(
            app,
            ["preview", "generate", str(media_root), "-d", str(preview_root), "--plan"],
            input="n\n",
        )
        assert result.exit_code == 0, result.output
        assert "[PLAN] Would render 5 preview(s)." in result.output
        assert not preview_root.exists()

    def test_overwrite_default_from_env(
        self, media_root: Path, preview_root: Path, monkeypatch
    ) -> None:
        monkeypatch.setenv("MG_OVERWRITE", "true")
        args = ["preview", "generate", str(media_root), "-d", str(preview_root), "--apply"]
        assert runner.invoke(app, args).exit_code == 0
        result = runner.invoke(app, args)
        assert result.exit_code == 0, result.output
        assert "Rendered 4 preview(s)" in result.output

        result = runner.invoke(app, [*args, "--no-overwrite"])
        assert "Rendered 0 preview(s)" in result.output

    def test_apply_and_plan_conflict(self, media_root: Path) -> None:
        result = runner.invoke(app, ["preview", "generate", str(media_root), "--apply", "--plan"])
        assert result.exit_code != 0
