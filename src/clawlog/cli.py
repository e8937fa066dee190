"""Typer CLI for clawlog: serve, sessions, show and search commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from result import Ok, Result

from clawlog.config import Config
from clawlog.errors import SessionLogError
from clawlog.presentation import (
    event_label,
    event_summary,
    filter_events,
    format_epoch_ms,
    sort_sessions,
    total_matches,
)
from clawlog.services.container import ServiceContainer

T = TypeVar("T")

app = typer.Typer(
    name="clawlog",
    help="Browse and search OpenClaw agent session logs.",
    no_args_is_help=True,
)

SessionsDirOption = Annotated[
    Path | None,
    typer.Option("--sessions-dir", help="Directory holding session .jsonl files"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print raw JSON")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable info logging")]


@app.command()
def serve(
    sessions_dir: SessionsDirOption = None,
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Port to listen on")] = 3000,
) -> None:
    """Run the JSON HTTP API."""
    import uvicorn

    from clawlog.api import create_app

    _setup_logging(verbose=True)
    config = _make_config(sessions_dir, host=host, port=port)
    typer.echo(f"clawlog serving {config.sessions_dir} at http://{config.host}:{config.port}")
    uvicorn.run(create_app(config), host=config.host, port=config.port)


@app.command()
def sessions(
    sessions_dir: SessionsDirOption = None,
    newest_first: Annotated[
        bool, typer.Option("--newest-first", help="Sort newest sessions first")
    ] = False,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """List sessions from the registry and the log directory."""
    _setup_logging(verbose)
    services = ServiceContainer.create(_make_config(sessions_dir))
    records = sort_sessions(
        _unwrap(services.session_service.list_sessions()),
        newest_first=newest_first,
    )

    if as_json:
        _echo_json([record.model_dump(mode="json", by_alias=True) for record in records])
        return
    if not records:
        typer.echo("No sessions found.")
        return

    for record in records:
        name = record.display_name or record.key or "Untitled Session"
        if record.from_file:
            name += " (no metadata)"
        badges = [record.channel or ""]
        if record.chat_type and record.chat_type != "unknown":
            badges.append(record.chat_type)
        badges.append(record.model or "")
        if record.total_tokens:
            badges.append(f"{record.total_tokens:,} tokens")
        meta = " ".join(f"[{badge}]" for badge in badges if badge)
        typer.echo(f"{format_epoch_ms(record.updated_at)}  {record.session_id}  {name}  {meta}".rstrip())


@app.command()
def show(
    session_id: Annotated[str, typer.Argument(help="Session id (log file name without .jsonl)")],
    sessions_dir: SessionsDirOption = None,
    filter_text: Annotated[
        str, typer.Option("--filter", help="Only show events containing this text")
    ] = "",
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show every event of one session."""
    _setup_logging(verbose)
    services = ServiceContainer.create(_make_config(sessions_dir))
    events = _unwrap(services.session_service.get_session_detail(session_id))
    shown = filter_events(events, filter_text)

    if as_json:
        _echo_json([event.model_dump(mode="json") for event in shown])
        return

    if filter_text.strip():
        typer.echo(f"Events: {len(shown)} of {len(events)} matching \"{filter_text.strip()}\"")
    else:
        typer.echo(f"Events: {len(events)}")
    for event in shown:
        typer.echo("")
        typer.echo(f"[{format_epoch_ms(event.timestamp_ms())}] {event_label(event)}")
        for line in event_summary(event).splitlines():
            typer.echo(f"  {line}")


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Case-insensitive substring")],
    sessions_dir: SessionsDirOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Search every session log for a substring."""
    _setup_logging(verbose)
    services = ServiceContainer.create(_make_config(sessions_dir))
    results = _unwrap(services.search_service.search(query))

    if as_json:
        _echo_json([result.model_dump(mode="json", by_alias=True) for result in results])
        return
    if not results:
        typer.echo(f'No results found for "{query}"')
        return

    names: dict[str, str] = {}
    listing = services.session_service.list_sessions()
    if isinstance(listing, Ok):
        names = {r.session_id: r.display_name for r in listing.ok_value if r.display_name}

    total = total_matches(results)
    typer.echo(
        f"Found {total} match{'es' if total != 1 else ''} in {len(results)} "
        f"session{'s' if len(results) != 1 else ''} for \"{query}\""
    )
    for result in results:
        typer.echo("")
        typer.echo(f"{names.get(result.session_id, result.session_id)}  ({result.match_count})")
        for hit in result.matches:
            typer.echo(f"  {hit.line_number}: {hit.snippet}")


def _make_config(sessions_dir: Path | None, **overrides: Any) -> Config:
    if sessions_dir is None:
        return Config(**overrides)
    return Config(sessions_dir=sessions_dir, **overrides)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _unwrap(result: Result[T, SessionLogError]) -> T:
    if isinstance(result, Ok):
        return result.ok_value
    typer.echo(f"Error: {result.err_value}", err=True)
    raise typer.Exit(code=1)


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
