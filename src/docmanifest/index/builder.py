"""Manifest generation pipeline."""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from docmanifest.artifacts import Manifest, Resource, Tool
from docmanifest.config import AppConfig
from docmanifest.errors import ArtifactMissingError, ConfigurationError, ManifestError
from docmanifest.index.digest import digest_one, digest_set
from docmanifest.index.rules import categorize, extract_tags
from docmanifest.index.storage import ArtifactStore
from docmanifest.index.tools import dangling_links, default_tools, resource_uri
from docmanifest.ingestion.metadata import extract_description, extract_title
from docmanifest.ingestion.reader import read_documents
from docmanifest.models import Document, GenerationResult
from docmanifest.utils.text import isoformat_utc, utc_now

LOGGER = logging.getLogger(__name__)


def bump_patch(version: str) -> str:
    """Increment the last numeric component of a dotted version string."""
    parts = version.split(".")
    try:
        parts[-1] = str(int(parts[-1]) + 1)
    except ValueError as exc:
        raise ConfigurationError(f"Cannot bump non-numeric version {version!r}") from exc
    return ".".join(parts)


class ManifestBuilder:
    """Turns a document tree into a manifest and its version record."""

    def __init__(
        self,
        config: AppConfig,
        *,
        tools: Sequence[Tool] | None = None,
        clock: Callable[[], str] = utc_now,
    ) -> None:
        self.config = config
        self.tools = list(tools) if tools is not None else default_tools(config.uri_scheme)
        self.clock = clock
        self.store = ArtifactStore(config.manifest_path, config.version_path)

    def build_resource(self, document: Document) -> Resource:
        content = document.content
        name = extract_title(content)
        category = categorize(document.path)
        return Resource(
            uri=resource_uri(document.stem_path, self.config.uri_scheme),
            name=name,
            description=extract_description(content) or f"Documentation for {name}",
            mime_type=self.config.mime_type,
            content_hash=digest_one(document.raw_bytes),
            last_modified=isoformat_utc(document.mtime),
            size=document.size,
            category=category,
            tags=extract_tags(category, content),
        )

    def build_resources(self, documents: Sequence[Document]) -> List[Resource]:
        resources = [self.build_resource(document) for document in documents]
        seen: dict[str, str] = {}
        for document, resource in zip(documents, resources):
            if resource.uri in seen:
                raise ConfigurationError(
                    f"Documents {seen[resource.uri]} and {document.path} "
                    f"both map to {resource.uri}"
                )
            seen[resource.uri] = document.path
        return resources

    def check_links(self, resources: Sequence[Resource]) -> None:
        dangling = dangling_links(self.tools, {resource.uri for resource in resources})
        if not dangling:
            return
        details = ", ".join(f"{tool} -> {uri}" for tool, uri in dangling)
        if self.config.strict_links:
            raise ConfigurationError(f"Tools reference unknown documents: {details}")
        for tool, uri in dangling:
            LOGGER.warning("Tool %s references unknown document %s", tool, uri)

    def next_version(self, documentation_hash: str, resource_count: int, tool_count: int) -> str:
        if self.config.version_policy == "manual":
            return self.config.base_version
        try:
            previous = self.store.load_version_record()
        except ArtifactMissingError:
            return self.config.base_version
        except ManifestError as exc:
            LOGGER.warning("Ignoring unreadable version record: %s", exc)
            return self.config.base_version
        if (
            previous.documentation_hash == documentation_hash
            and previous.resource_count == resource_count
            and previous.tool_count == tool_count
        ):
            return previous.version
        return bump_patch(previous.version)

    def build(self, documents: Sequence[Document]) -> Manifest:
        """Build a manifest from ``documents``; nothing is written."""
        documents = sorted(documents, key=lambda document: document.path)
        resources = self.build_resources(documents)
        self.check_links(resources)
        documentation_hash = digest_set(documents)
        return Manifest(
            version=self.next_version(documentation_hash, len(resources), len(self.tools)),
            generated_at=self.clock(),
            documentation_hash=documentation_hash,
            resource_count=len(resources),
            tool_count=len(self.tools),
            resources=resources,
            tools=list(self.tools),
        )

    def generate(self) -> GenerationResult:
        """Read the document root, build the manifest and persist both artifacts."""
        documents = read_documents(
            self.config.docs_dir,
            extension=self.config.extension,
            ignore=self.config.ignore,
            workers=self.config.workers,
        )
        LOGGER.info("Found %d documentation files", len(documents))
        manifest = self.build(documents)
        self.store.commit(manifest, manifest.version_record(last_sync=self.clock()))
        return GenerationResult(
            version=manifest.version,
            documentation_hash=manifest.documentation_hash,
            resource_count=manifest.resource_count,
            tool_count=manifest.tool_count,
            total_size=sum(document.size for document in documents),
            manifest_path=self.store.manifest_path,
            version_path=self.store.version_path,
        )
