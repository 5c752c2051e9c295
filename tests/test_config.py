"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from docmanifest.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.docs_dir == Path("docs")
        assert config.extension == ".md"
        assert "node_modules" in config.ignore
        assert "build" in config.ignore
        assert config.manifest_path == Path("mcp-resources.json")
        assert config.version_path == Path("mcp-version.json")
        assert config.uri_scheme == "toss"
        assert config.version_policy == "content"
        assert config.strict_links is True
        assert config.output_env_var == "GITHUB_OUTPUT"

    def test_extension_gets_leading_dot(self) -> None:
        """Should normalise extensions given without a dot."""
        assert AppConfig(extension="md").extension == ".md"

    def test_unknown_version_policy(self) -> None:
        """Should reject policies other than manual and content."""
        with pytest.raises(ValueError, match="version policy"):
            AppConfig(version_policy="sometimes")

    def test_workers_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            AppConfig(workers=0)

    def test_resolve_path_absolute(self) -> None:
        """Should return absolute path as-is."""
        resolved = AppConfig.resolve_path(Path("/absolute/docs"), Path("/base"))

        assert resolved == Path("/absolute/docs")

    def test_resolve_path_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        assert AppConfig.resolve_path(Path("docs"), None) == Path("docs")

    def test_resolved_anchors_every_path(self) -> None:
        """Should resolve docs, manifest and version paths against base_dir."""
        config = AppConfig(docs_dir=Path("content"), manifest_path=Path("/abs/m.json"))

        resolved = config.resolved(Path("/project"))

        assert resolved.docs_dir == Path("/project/content")
        assert resolved.manifest_path == Path("/abs/m.json")
        assert resolved.version_path == Path("/project/mcp-version.json")
        assert config.docs_dir == Path("content")
