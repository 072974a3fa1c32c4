"""CLI entry point for the wildtrace journey analytics."""

import click
import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

# Load .env before any wildtrace imports that might read env vars
load_dotenv()

SOURCES = ["csv", "http"]


def _fmt(value, digits: int = 1) -> str:
    return "no data" if value is None else f"{value:.{digits}f}"


@click.group()
def cli():
    """Travel journey analytics."""


@cli.command()
@click.option("--location", "scope", default="all", help="Location id, or 'all'")
@click.option("--source", type=click.Choice(SOURCES), default=None, help="Record source override")
def summary(scope: str, source: str | None):
    """Print headline environmental, biological and journal stats."""
    from wildtrace.snapshot import fetch_snapshot
    from wildtrace.transform.dashboard import build_dashboard

    try:
        snapshot = fetch_snapshot(source)
    except (ValueError, ValidationError, httpx.HTTPError) as e:
        click.echo(f"Error: {e}")
        return

    dashboard = build_dashboard(snapshot, scope)
    env = dashboard["environmental"]["stats"]
    bio = dashboard["biological"]["stats"]
    journal = dashboard["journal"]

    click.echo(f"Scope: {scope}")
    if env:
        temp = env["temperature"]
        click.echo(f"  Temperature: {_fmt(temp['avg'])}°C (min {_fmt(temp['min'])}, max {_fmt(temp['max'])})")
        click.echo(f"  Humidity: {_fmt(env['humidity']['avg'], 0)}%")
    else:
        click.echo("  Environmental: no data")
    if bio:
        low, high = bio["heart_rate"]["range"]
        click.echo(f"  Resting HR: {_fmt(bio['heart_rate']['avg'], 0)} BPM (range {_fmt(low, 0)}-{_fmt(high, 0)})")
        click.echo(f"  Sleep quality: {_fmt(bio['sleep']['avg'])}/10, stress: {_fmt(bio['stress']['avg'])}/10")
    else:
        click.echo("  Biological: no data")

    calmest = dashboard["biological"]["insights"]["calmest"]
    if calmest:
        click.echo(f"  Calmest: {calmest['location']} (harmony {calmest['harmony_score']:.0f}%)")
    click.echo(f"  Journal: {journal['entry_count']} entries, average mood {_fmt(journal['average_mood'])}/10")


@cli.command()
@click.option("--location", "scope", default="all", help="Location id, or 'all'")
@click.option("--source", type=click.Choice(SOURCES), default=None, help="Record source override")
def build(scope: str, source: str | None):
    """Derive every page's data and write dashboard.json."""
    from wildtrace.transform.dashboard import run_build

    try:
        run_build(source, scope)
    except (ValueError, ValidationError, httpx.HTTPError) as e:
        click.echo(f"Error: {e}")


@cli.command()
@click.option("--out", "out_dir", type=click.Path(file_okay=False), default=None, help="Output directory")
@click.option("--source", type=click.Choice(SOURCES), default=None, help="Record source override")
def export(out_dir: str | None, source: str | None):
    """Export all collections as CSV files."""
    from wildtrace.snapshot import fetch_snapshot
    from wildtrace.transform.archive import export_archive

    try:
        snapshot = fetch_snapshot(source)
    except (ValueError, ValidationError, httpx.HTTPError) as e:
        click.echo(f"Error: {e}")
        return

    click.echo("Exporting archive...")
    written = export_archive(snapshot, out_dir)
    click.echo(f"Wrote {len(written)} files")


@cli.command()
@click.option("--location", "location_id", type=str, required=True)
@click.option("--title", type=str, required=True)
@click.option("--content", type=str, default="")
@click.option("--mood", type=click.IntRange(1, 10), default=None)
@click.option("--emotion", "emotions", multiple=True, help="Repeat for several emotions")
@click.option("--highlight", is_flag=True, help="Mark as a highlight moment")
@click.option("--date", "entry_date", type=str, default=None, help="Entry date (YYYY-MM-DD), default today")
@click.option("--source", type=click.Choice(SOURCES), default=None, help="Record source override")
def log_entry(location_id, title, content, mood, emotions, highlight, entry_date, source):
    """Log a journal entry."""
    from datetime import date

    from wildtrace.models import JournalEntryCreate
    from wildtrace.snapshot import get_source

    try:
        record = JournalEntryCreate(
            location_id=location_id,
            date=entry_date or date.today(),
            title=title,
            content=content,
            emotions=emotions,
            mood_score=mood,
            highlight_moment=highlight,
        )
        records = get_source(source)
        try:
            entry = records.create_journal_entry(record)
        finally:
            records.close()
    except (ValueError, httpx.HTTPError) as e:
        click.echo(f"Error: {e}")
        return

    click.echo(f"Logged '{entry.title}' ({entry.date}) as {entry.id}")


if __name__ == "__main__":
    cli()
