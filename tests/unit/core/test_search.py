"""Unit tests for search path resolution."""

import os
from pathlib import Path

import pytest
from toolcommon.core.search import FileNotFoundForPatternError, get_files, split_search_path


@pytest.fixture
def sources(tmp_path: Path) -> Path:
    """Project layout with a src directory of mixed files."""
    src = tmp_path / "src"
    (src / "nested.wxs").mkdir(parents=True)
    (src / "product.wxs").write_text("<Wix/>")
    (src / "ui.wxs").write_text("<Wix/>")
    (src / "readme.txt").write_text("notes")
    (tmp_path / "build").mkdir()
    return tmp_path


class TestSplitSearchPath:
    """Tests for split_search_path."""

    def test_no_separator(self) -> None:
        """A bare pattern searches the current directory."""
        assert split_search_path("*.wxs") == (".", "*.wxs")

    def test_keeps_relative_segments(self) -> None:
        """Directory part keeps '..' and its trailing separator."""
        path = os.path.join("..", "src", "*.wxs")
        assert split_search_path(path) == (os.path.join("..", "src") + os.sep, "*.wxs")

    @pytest.mark.skipif(os.altsep is None, reason="platform has no alternate separator")
    def test_alternate_separator(self) -> None:
        """Alternate separators are normalized."""
        assert split_search_path("src/*.wxs") == ("src" + os.sep, "*.wxs")


class TestGetFiles:
    """Tests for get_files."""

    def test_wildcard_match(self, sources: Path) -> None:
        """Only regular files matching the pattern are returned, sorted."""
        files = get_files(str(sources / "src" / "*.wxs"), "Source")

        assert [Path(f).name for f in files] == ["product.wxs", "ui.wxs"]

    def test_parent_segment(self, sources: Path) -> None:
        """Search paths may walk up with '..'."""
        search = os.path.join(str(sources / "build"), "..", "src", "ui.*")
        files = get_files(search, "Source")

        assert len(files) == 1
        assert files[0].startswith(os.path.join(str(sources / "build"), "..", "src"))
        assert Path(files[0]).resolve() == (sources / "src" / "ui.wxs").resolve()

    def test_relative_to_cwd(self, sources: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A bare pattern is resolved against the working directory."""
        monkeypatch.chdir(sources / "src")

        assert get_files("*.txt", "Text") == [os.path.join(".", "readme.txt")]

    def test_no_match_raises(self, sources: Path) -> None:
        """No matching file raises with the search path and type."""
        search = str(sources / "src" / "*.wxl")
        with pytest.raises(FileNotFoundForPatternError) as exc_info:
            get_files(search, "Localization")

        assert exc_info.value.search_path == search
        assert exc_info.value.file_type == "Localization"
        assert "Localization" in str(exc_info.value)

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """A missing directory is reported as no match."""
        with pytest.raises(FileNotFoundForPatternError):
            get_files(str(tmp_path / "nope" / "*.wxs"), "Source")

    def test_none_rejected(self) -> None:
        """None is a programming error."""
        with pytest.raises(ValueError):
            get_files(None, "Source")  # type: ignore[arg-type]
