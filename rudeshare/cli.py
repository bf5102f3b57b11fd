"""RudeShare CLI — moderate text, roast polite people, run the board API."""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rudeshare import __version__
from rudeshare.config import Settings
from rudeshare.log import configure_logging

console = Console()

_SEVERITY_STYLE = {
    "allowed": "green",
    "banned_polite": "yellow",
    "banned_illegal": "red",
}


def _score_style(score: int) -> str:
    """Badge colour for a rudeness score."""
    if score >= 80:
        return "bold red"
    if score >= 50:
        return "red"
    if score >= 20:
        return "yellow"
    return "dim"


@click.group()
@click.version_option(version=__version__)
def main():
    """RudeShare — the anonymous board where politeness gets you banned.

    Moderate text the way the board does, inspect the Hall of Shame,
    and serve the REST API.
    """
    configure_logging(Settings.from_env().log_level)


# ── Moderate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the verdict as JSON")
def moderate(text: tuple[str, ...], as_json: bool):
    """Run TEXT through the moderation engine and show the verdict."""
    from rudeshare.moderation.moderator import generate_rude_response
    from rudeshare.moderation.moderator import moderate as run_moderation
    from rudeshare.moderation.models import Severity

    content = " ".join(text).strip()
    verdict = run_moderation(content)

    if as_json:
        click.echo(json.dumps(verdict.to_dict(), indent=2))
        return

    table = Table(title="Moderation Verdict", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    style = _SEVERITY_STYLE[verdict.severity.value]
    table.add_row("Severity", f"[{style}]{verdict.severity.value}[/]")
    table.add_row("Rudeness", f"[{_score_style(verdict.rudeness_score)}]{verdict.rudeness_score}[/]")
    table.add_row("Death threat", "yes" if verdict.is_death_threat else "no")
    table.add_row("Harassment", "yes" if verdict.is_harassment else "no")
    table.add_row("Too polite", "yes" if verdict.is_too_polite else "no")
    table.add_row("Flagged", escape(", ".join(verdict.flagged_terms)) or "-")
    console.print(table)

    if verdict.severity is Severity.banned_polite:
        console.print(f"\n[yellow]{escape(generate_rude_response(verdict.flagged_terms))}[/]")


# ── Roast ────────────────────────────────────────────────────────────


@main.command()
@click.argument("terms", nargs=-1, required=True)
def roast(terms: tuple[str, ...]):
    """Generate a rude response aimed at the first of TERMS."""
    from rudeshare.moderation.moderator import generate_rude_response

    click.echo(generate_rude_response(list(terms)))


# ── Challenge ────────────────────────────────────────────────────────


@main.command()
@click.option("--random", "pick_random", is_flag=True, help="Pick any challenge, not today's")
def challenge(pick_random: bool):
    """Show today's brutal challenge."""
    from rudeshare.board.challenges import challenge_for_day, random_challenge

    prompt = random_challenge() if pick_random else challenge_for_day()
    console.print(Panel(escape(prompt), title="Brutal Challenge"))


# ── Hall of Shame ────────────────────────────────────────────────────


@main.command()
@click.option(
    "--limit", "-n", type=click.IntRange(min=1), default=10, show_default=True, help="Number of entries to show"
)
def shame(limit: int):
    """List the most recent posts banned for being too polite."""
    from rudeshare.board.shame import HallOfShame

    entries = HallOfShame(Settings.from_env().shame_dir).list_entries(limit)
    if not entries:
        console.print("[green]The Hall of Shame is empty. Everyone is suitably rude.[/]")
        return

    table = Table(title=f"Hall of Shame ({len(entries)} shown)")
    table.add_column("When", style="dim")
    table.add_column("Content")
    table.add_column("Flagged", style="yellow")
    table.add_column("Response", style="red")
    for entry in entries:
        table.add_row(
            entry.timestamp[:19],
            escape(entry.content[:60]),
            escape(", ".join(entry.flagged_terms)),
            escape(entry.rude_response),
        )
    console.print(table)


# ── Serve ────────────────────────────────────────────────────────────


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool):
    """Run the REST API with uvicorn."""
    import uvicorn

    console.print(f"\n[bold blue]RudeShare[/] — serving on http://{host}:{port}\n")
    uvicorn.run("web.backend.app.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
