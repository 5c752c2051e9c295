"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

VERSION_POLICIES = ("manual", "content")


@dataclass(slots=True)
class AppConfig:
    docs_dir: Path = Path("docs")
    extension: str = ".md"
    ignore: Tuple[str, ...] = ("node_modules", "build", ".docusaurus")
    manifest_path: Path = Path("mcp-resources.json")
    version_path: Path = Path("mcp-version.json")
    uri_scheme: str = "toss"
    mime_type: str = "text/markdown"
    base_version: str = "1.0.0"
    version_policy: str = "content"
    strict_links: bool = True
    workers: int = 4
    output_env_var: str = "GITHUB_OUTPUT"

    def __post_init__(self) -> None:
        self.docs_dir = Path(self.docs_dir)
        self.manifest_path = Path(self.manifest_path)
        self.version_path = Path(self.version_path)
        self.ignore = tuple(self.ignore)
        if not self.extension.startswith("."):
            self.extension = f".{self.extension}"
        if self.version_policy not in VERSION_POLICIES:
            raise ValueError(
                f"Unknown version policy {self.version_policy!r}, "
                f"expected one of {', '.join(VERSION_POLICIES)}"
            )
        if self.workers < 1:
            raise ValueError("workers must be at least 1")

    @staticmethod
    def resolve_path(path: Path, base_dir: Path | None = None) -> Path:
        if Path(path).is_absolute() or base_dir is None:
            return Path(path)
        return base_dir / path

    def resolved(self, base_dir: Path | None = None) -> "AppConfig":
        """Return a copy whose paths are anchored at ``base_dir``."""
        return replace(
            self,
            docs_dir=self.resolve_path(self.docs_dir, base_dir),
            manifest_path=self.resolve_path(self.manifest_path, base_dir),
            version_path=self.resolve_path(self.version_path, base_dir),
        )
