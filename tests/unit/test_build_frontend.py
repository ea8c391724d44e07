"""Unit tests for the frontend build helper."""

from pathlib import Path
from unittest.mock import patch

import pytest

from menu_catalog import build_frontend as build_module
from menu_catalog.build_frontend import FRONTEND_FILES, build_frontend, main


@pytest.mark.unit
class TestBuildFrontend:
    """Test suite for copying the static client."""

    def test_copies_all_files(self, tmp_path: Path) -> None:
        dist = tmp_path / "dist"

        copied = build_frontend(dist)

        assert sorted(p.name for p in copied) == sorted(FRONTEND_FILES)
        assert sorted(p.name for p in dist.iterdir()) == sorted(FRONTEND_FILES)
        assert (dist / "index.html").read_text(encoding="utf-8") == (
            build_module.STATIC_DIR / "index.html"
        ).read_text(encoding="utf-8")

    def test_missing_source_file_is_skipped(self, tmp_path: Path) -> None:
        """Test that a missing file is logged and the rest still copied."""
        source = tmp_path / "public"
        source.mkdir()
        (source / "index.html").write_text("<html></html>", encoding="utf-8")
        (source / "script.js").write_text("// app", encoding="utf-8")

        copied = build_frontend(tmp_path / "dist", source_dir=source)

        assert sorted(p.name for p in copied) == ["index.html", "script.js"]

    def test_main_uses_argument(self, tmp_path: Path) -> None:
        dist = tmp_path / "out"

        with patch.object(build_module, "configure_logging"):
            exit_code = main([str(dist)])

        assert exit_code == 0
        assert (dist / "script.js").exists()

    def test_main_reports_unwritable_destination(self, tmp_path: Path) -> None:
        """Test that a destination blocked by a file makes main fail."""
        blocker = tmp_path / "dist"
        blocker.write_text("not a directory", encoding="utf-8")

        with patch.object(build_module, "configure_logging"):
            exit_code = main([str(blocker)])

        assert exit_code == 1
