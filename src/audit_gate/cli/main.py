"""CLI for audit-gate: validate / replay / serve commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from audit_gate.core.config import AppSettings
from audit_gate.exceptions import GateRejection, JSONParseError
from audit_gate.hooks import setup_logging
from audit_gate.parsing import extract_json
from audit_gate.replay import verify_replay
from audit_gate.validation.gate import AuditGate

app = typer.Typer(name="audit-gate", help="Output-contract gate for generated policy audit reports")
console = Console()


def _configure(verbose: bool) -> AppSettings:
    settings = AppSettings()
    if verbose:
        settings.observability.log_level = "DEBUG"
    setup_logging(settings.observability)
    return settings


def _load_object(path: Path) -> dict:
    try:
        raw = extract_json(path.read_text(encoding="utf-8"))
    except JSONParseError as exc:
        console.print(f"[bold red]UNPARSEABLE[/bold red] {path}: {exc}")
        raise typer.Exit(code=2) from exc
    if not isinstance(raw, dict):
        console.print(f"[bold red]UNPARSEABLE[/bold red] {path}: expected a JSON object")
        raise typer.Exit(code=2)
    return raw


def _print_rejection(exc: GateRejection) -> None:
    console.print(f"[bold red]REJECTED[/bold red] {exc.kind.value}")

    table = Table(title=f"{len(exc.issues)} issue(s)")
    table.add_column("Kind", style="red")
    table.add_column("Field", style="cyan")
    table.add_column("Message", max_width=70)
    table.add_column("Value", max_width=30)

    for issue in exc.issues:
        table.add_row(issue.kind.value, issue.field_path or "-", issue.message, issue.actual_value)

    console.print(table)


@app.command()
def validate(
    report_file: Path = typer.Argument(..., help="Recorded generator output (JSON, optionally fenced)"),
    output: Optional[Path] = typer.Option(None, help="Write the accepted report JSON here"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Run a recorded report through the gate."""
    settings = _configure(verbose)
    gate = AuditGate(settings.validation)

    try:
        document = gate.accept_text(report_file.read_text(encoding="utf-8"))
    except JSONParseError as exc:
        console.print(f"[bold red]UNPARSEABLE[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except GateRejection as exc:
        _print_rejection(exc)
        raise typer.Exit(code=1) from exc

    console.print(
        f"[bold green]ACCEPTED[/bold green] final_score={document.audit_ledger.final_score} "
        f"verdict={document.final_verdict.label.value} "
        f"entries={len(document.audit_ledger.entries)}"
    )
    if output:
        output.write_text(document.model_dump_json(indent=2, exclude_unset=True), encoding="utf-8")
        console.print(f"[green]Report saved to {output}[/green]")


@app.command()
def replay(
    original_file: Path = typer.Argument(..., help="Recorded report JSON"),
    replay_file: Path = typer.Argument(..., help="Re-generated report JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Check whether a re-run reproduced a recorded report."""
    _configure(verbose)
    result = verify_replay(_load_object(original_file), _load_object(replay_file))

    console.print(f"[bold]Original hash:[/bold] {result.original_hash}")
    console.print(f"[bold]Replay hash:[/bold]   {result.replay_hash}")
    if result.matches:
        console.print("[bold green]Replay verified[/bold green]")
        return

    for diff in result.diffs:
        console.print(f"[red]- {diff}[/red]")
    raise typer.Exit(code=1)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Bind port"),
) -> None:
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    settings = AppSettings()
    logging.getLogger(__name__).info("Starting API on %s:%s", host or settings.api.host, port or settings.api.port)
    uvicorn.run(
        "audit_gate.api.app:app",
        host=host or settings.api.host,
        port=port or settings.api.port,
    )


if __name__ == "__main__":
    app()
