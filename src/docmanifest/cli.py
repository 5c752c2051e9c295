"""Command line interface for docmanifest."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docmanifest.config import AppConfig
from docmanifest.errors import (
    ArtifactInvalidError,
    ArtifactMissingError,
    CountMismatchError,
    HashMismatchError,
    ManifestError,
)
from docmanifest.index.builder import ManifestBuilder
from docmanifest.index.digest import digest_set
from docmanifest.index.validator import SyncValidator
from docmanifest.ingestion.reader import read_documents
from docmanifest.utils.text import short_hash

console = Console()
app = typer.Typer(help="docmanifest - resource manifest for documentation trees")

REMEDIATION = "Run: docmanifest generate"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(
    docs: Optional[Path],
    manifest: Optional[Path],
    version_file: Optional[Path],
    **overrides: object,
) -> AppConfig:
    defaults = AppConfig()
    config = AppConfig(
        docs_dir=docs if docs is not None else defaults.docs_dir,
        manifest_path=manifest if manifest is not None else defaults.manifest_path,
        version_path=version_file if version_file is not None else defaults.version_path,
        **{key: value for key, value in overrides.items() if value is not None},
    )
    return config.resolved(Path.cwd())


def _fail(message: str, hint: str | None = None) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    if hint:
        console.print(f"   {hint}")
    raise typer.Exit(code=1)


DocsOption = typer.Option(None, "--docs", envvar="DOCMANIFEST_DOCS", help="Documentation root")
ManifestOption = typer.Option(
    None, "--manifest", envvar="DOCMANIFEST_MANIFEST", help="Manifest artifact path"
)
VersionOption = typer.Option(
    None, "--version-file", envvar="DOCMANIFEST_VERSION_FILE", help="Version record path"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command()
def generate(
    docs: Optional[Path] = DocsOption,
    manifest: Optional[Path] = ManifestOption,
    version_file: Optional[Path] = VersionOption,
    scheme: Optional[str] = typer.Option(None, envvar="DOCMANIFEST_SCHEME", help="URI scheme"),
    version_policy: Optional[str] = typer.Option(
        None, envvar="DOCMANIFEST_VERSION_POLICY", help="Version policy: manual or content"
    ),
    strict_links: bool = typer.Option(
        True, "--strict-links/--no-strict-links", help="Fail on tools linking to unknown documents"
    ),
    workers: int = typer.Option(AppConfig().workers, help="Parallel document readers"),
    verbose: bool = VerboseOption,
) -> None:
    """Scan the documentation and (re)write the manifest and version record."""
    _setup_logging(verbose)
    try:
        config = _build_config(
            docs,
            manifest,
            version_file,
            uri_scheme=scheme,
            version_policy=version_policy,
            strict_links=strict_links,
            workers=workers,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print("Generating resources from documentation...")
    try:
        result = ManifestBuilder(config).generate()
    except ManifestError as exc:
        _fail(f"Error generating manifest: {exc}")

    console.print("[green]Manifest generated successfully[/green]")
    console.print(f"   Resources: {result.resource_count}")
    console.print(f"   Tools: {result.tool_count}")
    console.print(f"   Total Size: {result.total_size / 1024:.2f} KB")
    console.print(f"   Doc Hash: {short_hash(result.documentation_hash)}")
    console.print(f"   Version: {result.version}")
    console.print("Saved to:")
    console.print(f"   {result.manifest_path}", soft_wrap=True)
    console.print(f"   {result.version_path}", soft_wrap=True)


@app.command()
def validate(
    docs: Optional[Path] = DocsOption,
    manifest: Optional[Path] = ManifestOption,
    version_file: Optional[Path] = VersionOption,
    workers: int = typer.Option(AppConfig().workers, help="Parallel document readers"),
    verbose: bool = VerboseOption,
) -> None:
    """Check that the manifest still matches the documentation; exit 1 if not."""
    _setup_logging(verbose)
    try:
        config = _build_config(docs, manifest, version_file, workers=workers)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    validator = SyncValidator(config)

    console.print("Validating manifest sync...")
    try:
        report = validator.inspect()
    except ArtifactMissingError as exc:
        for path in exc.paths:
            console.print(f"[red]{path.name} not found![/red]", soft_wrap=True)
        _fail("Artifacts missing.", REMEDIATION)
    except ArtifactInvalidError as exc:
        _fail(f"Invalid artifact: {exc}", REMEDIATION)
    except ManifestError as exc:
        _fail(f"Validation failed: {exc}")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("")
    table.add_column("Documentation hash", overflow="fold")
    table.add_column("Documents")
    table.add_row("current", report.current_hash, str(report.current_count))
    table.add_row("recorded", report.recorded_hash, str(report.recorded_count))
    console.print(table)

    try:
        report.check()
    except CountMismatchError as exc:
        _fail(
            f"Resource count mismatch! Docs: {exc.actual}, manifest: {exc.expected}",
            REMEDIATION,
        )
    except HashMismatchError:
        _fail(
            "Manifest OUT OF SYNC! Documentation has changed since it was last generated.",
            REMEDIATION,
        )

    record = report.record
    console.print("[green]Manifest is IN SYNC[/green]")
    console.print(f"   Version: {record.version}")
    console.print(f"   Resources: {record.resource_count}")
    console.print(f"   Tools: {record.tool_count}")
    console.print(f"   Last Sync: {record.last_sync}")


@app.command("hash")
def hash_(
    docs: Optional[Path] = DocsOption,
    workers: int = typer.Option(AppConfig().workers, help="Parallel document readers"),
) -> None:
    """Print the current documentation hash."""
    try:
        config = _build_config(docs, None, None, workers=workers)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    try:
        documents = read_documents(
            config.docs_dir,
            extension=config.extension,
            ignore=config.ignore,
            workers=config.workers,
        )
    except ManifestError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    value = digest_set(documents)
    typer.echo(value)

    output = os.environ.get(config.output_env_var)
    if output:
        with open(output, "a", encoding="utf-8") as handle:
            handle.write(f"hash={value}\n")
