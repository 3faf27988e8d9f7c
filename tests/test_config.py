"""Tests for the configuration module."""

from pathlib import Path

import pytest

from graphstore._cli.config import (
    ConfigError,
    GraphstoreConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for locating the pyproject.toml that holds [tool.graphstore]."""

    def test_nearest_file_wins(self, tmp_path: Path) -> None:
        """Should prefer a nested pyproject.toml over one further up."""
        (tmp_path / "pyproject.toml").write_text("[tool.graphstore]\nstrict = true\n")
        nested = tmp_path / "service"
        nested.mkdir()
        (nested / "pyproject.toml").write_text("[tool.graphstore]\nseparator = ':'\n")

        assert find_pyproject_toml(nested) == nested / "pyproject.toml"

    def test_walks_up_from_graph_directory(self, tmp_path: Path) -> None:
        """Should reach the project file from a deeply nested working directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.graphstore]\n")
        deep = tmp_path / "graphs" / "build"
        deep.mkdir(parents=True)

        assert find_pyproject_toml(deep) == tmp_path / "pyproject.toml"

    def test_ignores_directory_named_pyproject(self, tmp_path: Path) -> None:
        """Should skip a directory named pyproject.toml and keep searching."""
        (tmp_path / "pyproject.toml").write_text("[tool.graphstore]\n")
        inner = tmp_path / "inner"
        (inner / "pyproject.toml").mkdir(parents=True)

        assert find_pyproject_toml(inner) == tmp_path / "pyproject.toml"


class TestLoadConfig:
    """Tests for reading [tool.graphstore]."""

    def test_missing_section_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to the defaults when the table is absent."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == GraphstoreConfig()
        assert config.separator == "->"
        assert config.strict is False

    def test_reads_values(self, tmp_path: Path) -> None:
        """Should read both separator and strict."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphstore]
separator = ":"
strict = true
""",
        )

        assert load_config(pyproject) == GraphstoreConfig(separator=":", strict=True)

    def test_partial_section_keeps_other_default(self, tmp_path: Path) -> None:
        """Should keep the default separator when only strict is set."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphstore]\nstrict = true\n")

        assert load_config(pyproject) == GraphstoreConfig(strict=True)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Should wrap TOML syntax errors in ConfigError."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphstore\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_invalid_separator(self, tmp_path: Path) -> None:
        """Should reject a blank separator."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.graphstore]\nseparator = " "\n')

        with pytest.raises(ConfigError, match="separator"):
            load_config(pyproject)

    def test_invalid_strict(self, tmp_path: Path) -> None:
        """Should reject a non-boolean strict flag."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.graphstore]\nstrict = "yes"\n')

        with pytest.raises(ConfigError, match="strict"):
            load_config(pyproject)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Should name unknown keys in the error."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphstore]\ncolour = 1\n")

        with pytest.raises(ConfigError, match="colour"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for resolving config from the working directory."""

    def test_reads_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should load the [tool.graphstore] table found from the working directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.graphstore]\nstrict = true\n")
        monkeypatch.chdir(tmp_path)

        assert get_config() == GraphstoreConfig(strict=True)

    def test_section_absent_matches_plain_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should give the same object as an empty config when the table is absent."""
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'test'\n")
        monkeypatch.chdir(tmp_path)

        assert get_config() == GraphstoreConfig()
