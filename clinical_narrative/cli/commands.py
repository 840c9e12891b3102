"""CLI commands for the Clinical Narrative Builder."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from clinical_narrative.config import get_settings

app = typer.Typer(
    name="cnb",
    help="Context-aware intervention builder and daily-note narratives for OT/PT",
    add_completion=False,
)
console = Console()


def get_session_store():
    """Session store in the configured directory."""
    from clinical_narrative.storage import SessionStore

    return SessionStore(get_settings().sessions_dir)


@app.command()
def version():
    """Show version information."""
    from clinical_narrative import __version__

    console.print(f"Clinical Narrative Builder v{__version__}")


@app.command()
def tags():
    """List the tag library with namespace weights."""
    from clinical_narrative.tagging import TAG_LIBRARY, is_skill, namespace_of, weight_of

    table = Table(title="Tag Library")
    table.add_column("Group")
    table.add_column("Class")
    table.add_column("Weight", justify="right")
    table.add_column("Tags")

    for group, group_tags in TAG_LIBRARY.items():
        namespace = namespace_of(group_tags[0])
        kind = "[cyan]skill[/cyan]" if is_skill(group_tags[0]) else "context"
        table.add_row(group, kind, str(weight_of(namespace)), ", ".join(group_tags))

    console.print(table)


@app.command()
def suggest(
    category: str = typer.Argument(..., help="Intervention category"),
    activities: list[str] = typer.Option(
        [], "--activity", "-a", help="Selected activity (repeatable)"
    ),
    pool: str = typer.Option("goals", "--pool", "-p", help="Pool: goals, impairments, cueing_purposes"),
    threshold: Optional[int] = typer.Option(None, "--threshold", "-t", help="Relevance threshold"),
    query: str = typer.Option("", "--query", "-q", help="Search text"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the options suggested for a set of selected activities."""
    from clinical_narrative.exceptions import UnknownPoolError
    from clinical_narrative.suggestions import derive_activity_tags, suggest_options
    from clinical_narrative.vocabulary import TAGGED_ACTIVITIES, get_pool

    try:
        items = get_pool(pool)
    except UnknownPoolError as e:
        console.print(f"[red]{e}. Use goals, impairments or cueing_purposes[/red]")
        raise typer.Exit(1)

    if category not in TAGGED_ACTIVITIES:
        console.print(f"[red]No tagged activities for category: {category}[/red]")
        raise typer.Exit(1)

    known = {item.value for item in TAGGED_ACTIVITIES[category]}
    for activity in activities:
        if activity not in known:
            console.print(f"[yellow]Unknown activity ignored: {activity}[/yellow]")

    activity_tags = derive_activity_tags(category, activities)
    result = suggest_options(items, activity_tags, query=query, threshold=threshold)

    if output_json:
        console.print_json(result.model_dump_json())
        return

    if activity_tags:
        console.print(f"[dim]Reference tags: {', '.join(activity_tags)}[/dim]")

    table = Table(title=f"{pool} ({result.mode})")
    table.add_column("Score", justify="right")
    table.add_column("Option")
    table.add_column("Tags", style="dim")
    for option in result.options:
        table.add_row(str(option.score), option.item.value, ", ".join(option.item.tags))
    console.print(table)

    if result.has_more:
        console.print(
            f"[dim]Showing {len(result.options)} of {result.suggested_count} relevant options; "
            f"use --query to search all {result.total}.[/dim]"
        )


@app.command()
def narrative(
    session_file: Path = typer.Argument(..., help="Session JSON file"),
    save: bool = typer.Option(False, "--save", help="Save the session with its narrative"),
):
    """Generate the narrative for a session file."""
    from clinical_narrative.narrative import Session, generate_narrative, set_narrative
    from clinical_narrative.observability import get_observability_logger

    if not session_file.exists():
        console.print(f"[red]Session file not found: {session_file}[/red]")
        raise typer.Exit(1)

    try:
        session = Session.model_validate_json(session_file.read_text())
    except ValidationError as e:
        console.print(f"[red]Invalid session file: {e}[/red]")
        raise typer.Exit(1)

    obs = get_observability_logger()
    with obs.narrative_run(
        session.session_id,
        len(session.interventions),
        plan_count=len(session.plan),
        cpt_codes=sorted({i.cpt_code for i in session.interventions}),
    ) as event:
        text = generate_narrative(session)
        event.narrative_length = len(text)

    console.print(Panel(text, title=f"Narrative {session.session_date.isoformat()}"))

    if save:
        store = get_session_store()
        store.save(set_narrative(session, text))
        console.print(f"[green]Saved session {session.session_id}[/green]")


@app.command()
def sessions(
    action: str = typer.Argument("list", help="Action: list, show, delete, export"),
    session_id: Optional[str] = typer.Argument(None, help="Session ID for show/delete"),
):
    """Manage saved sessions."""
    from clinical_narrative.exceptions import SessionNotFoundError

    store = get_session_store()

    if action == "list":
        saved = store.list()
        if not saved:
            console.print("[yellow]No saved sessions.[/yellow]")
            return

        table = Table(title="Saved Sessions")
        table.add_column("Session ID")
        table.add_column("Date")
        table.add_column("Minutes", justify="right")
        table.add_column("Interventions", justify="right")
        for session in saved:
            table.add_row(
                session.session_id,
                session.session_date.isoformat(),
                str(session.total_duration),
                str(len(session.interventions)),
            )
        console.print(table)

    elif action in ("show", "delete"):
        if not session_id:
            console.print(f"[red]Session ID required for {action} action.[/red]")
            raise typer.Exit(1)

        try:
            if action == "show":
                session = store.load(session_id)
                console.print_json(session.model_dump_json())
            else:
                store.delete(session_id)
                console.print(f"[green]Deleted session {session_id}[/green]")
        except SessionNotFoundError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    elif action == "export":
        console.print_json(store.export())

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        console.print("Available actions: list, show, delete, export")
        raise typer.Exit(1)


@app.command()
def check_vocabulary():
    """Check that every vocabulary tag is known to the tag library."""
    from clinical_narrative.vocabulary import (
        POOLS,
        TAGGED_ACTIVITIES,
        find_unknown_tags,
        find_unregistered_namespaces,
    )

    table = Table(title="Vocabulary")
    table.add_column("Pool")
    table.add_column("Items", justify="right")
    for name, items in POOLS.items():
        table.add_row(name, str(len(items)))
    table.add_row("activities", str(sum(len(a) for a in TAGGED_ACTIVITIES.values())))
    console.print(table)

    unknown = find_unknown_tags()
    if unknown:
        console.print(f"[yellow]{len(unknown)} tag(s) not in the tag library:[/yellow]")
        for tag, values in sorted(unknown.items()):
            console.print(f"  {tag} [dim]({len(values)} item(s), e.g. {values[0]})[/dim]")
    else:
        console.print("[green]All tags are in the tag library.[/green]")

    unregistered = find_unregistered_namespaces()
    if unregistered:
        console.print(f"[red]Unregistered namespaces: {', '.join(sorted(unregistered))}[/red]")
        raise typer.Exit(1)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
):
    """Start the REST API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"Starting Clinical Narrative Builder API on {host}:{port}")
    uvicorn.run(
        "clinical_narrative.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
