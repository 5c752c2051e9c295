"""Pydantic models describing the persisted manifest artifacts.

Field names are snake_case in Python and camelCase on disk.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ArtifactModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2) + "\n"


class Resource(ArtifactModel):
    uri: str
    name: str
    description: str | None = None
    mime_type: str
    content_hash: str
    last_modified: str
    size: int
    category: str
    tags: List[str] = Field(default_factory=list)


class Tool(ArtifactModel):
    name: str
    description: str
    schema_uri: str
    related_docs: List[str] = Field(default_factory=list)


class VersionRecord(ArtifactModel):
    version: str
    generated_at: str
    documentation_hash: str
    resource_count: int
    tool_count: int
    last_sync: str


class Manifest(ArtifactModel):
    version: str
    generated_at: str
    documentation_hash: str
    resource_count: int
    tool_count: int
    resources: List[Resource] = Field(default_factory=list)
    tools: List[Tool] = Field(default_factory=list)

    def version_record(self, last_sync: str) -> VersionRecord:
        """Project the summary fields into a :class:`VersionRecord`."""
        return VersionRecord(
            version=self.version,
            generated_at=self.generated_at,
            documentation_hash=self.documentation_hash,
            resource_count=self.resource_count,
            tool_count=self.tool_count,
            last_sync=last_sync,
        )

    def agrees_with(self, record: VersionRecord) -> bool:
        return (
            self.version == record.version
            and self.generated_at == record.generated_at
            and self.documentation_hash == record.documentation_hash
            and self.resource_count == record.resource_count
            and self.tool_count == record.tool_count
        )
