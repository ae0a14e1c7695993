"""CLI commands for event invitation management."""

import asyncio
from datetime import datetime
from uuid import UUID

import typer

from src.config.database import async_session_manager
from src.config.logging import setup_logging
from src.errors import InvitationError
from src.events.repository.orm_models import Event
from src.events.repository.read_models import SqlEventReadModel
from src.invitees.features.register.write_model import DirectoryRegisterWriteModel
from src.invitees.repository.directory import SqlIdentityDirectory
from src.notifications import get_dispatcher, get_welcome_channels
from src.rsvp.features.list_rsvps.read_model import StoreRSVPListReadModel
from src.rsvp.repository.store import SqlRSVPStore

app = typer.Typer(help="CLI commands for event invitation management")


@app.callback()
def main():
    setup_logging()


@app.command()
def create_event(
    name: str = typer.Argument(..., help="Event name"),
    location: str = typer.Option(
        None,
        "--location",
        "-l",
        help="Where the event takes place",
    ),
    starts_at: datetime = typer.Option(
        None,
        "--starts-at",
        help="Start date and time, e.g. 2026-05-01T18:00:00",
    ),
    capacity: int = typer.Option(
        None,
        "--capacity",
        "-c",
        help="Maximum number of attendees",
    ),
):
    """Create an event that invitees can RSVP to."""
    async def _create_event():
        async with async_session_manager() as session:
            event = Event(
                name=name,
                location=location,
                starts_at=starts_at,
                capacity=capacity,
            )
            session.add(event)
            await session.flush()  # Get the UUID
            return event.uuid

    event_id = asyncio.run(_create_event())

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Event ID: {event_id}", fg=typer.colors.CYAN)
    typer.secho(f"  Name: {name}", fg=typer.colors.BLUE)
    if location:
        typer.secho(f"  Location: {location}", fg=typer.colors.BLUE)


@app.command()
def register(
    email: str = typer.Argument(..., help="Invitee email"),
    phone: str = typer.Argument(..., help="Invitee phone in international format, e.g. +15551234567"),
):
    """Register an invitee and send the welcome notification."""
    write_model = DirectoryRegisterWriteModel(
        directory=SqlIdentityDirectory(),
        dispatcher=get_dispatcher(),
        channels=get_welcome_channels(),
    )

    try:
        result = asyncio.run(write_model.register(email=email, phone=phone))
    except InvitationError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Invitee registered!", fg=typer.colors.GREEN)
    typer.secho(f"  Invitee ID: {result.invitee.id}", fg=typer.colors.CYAN)
    typer.echo()
    typer.secho("Welcome notification:", fg=typer.colors.GREEN)
    for attempt in result.welcome_report.attempts:
        if attempt.delivered:
            typer.secho(f"  {attempt.channel.value}: sent ({attempt.handle})", fg=typer.colors.BLUE)
        else:
            typer.secho(f"  {attempt.channel.value}: failed ({attempt.reason})", fg=typer.colors.YELLOW)


@app.command()
def list_rsvps(
    event_id: str = typer.Argument(..., help="Event UUID"),
    latest_only: bool = typer.Option(
        False,
        "--latest-only",
        help="Only show the most recent response per email",
    ),
):
    """List RSVP responses recorded for an event."""
    read_model = StoreRSVPListReadModel(
        store=SqlRSVPStore(),
        event_read_model=SqlEventReadModel(),
    )

    try:
        records = asyncio.run(read_model.list_responses(UUID(event_id), latest_only=latest_only))
    except InvitationError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    if not records:
        typer.secho("No responses yet.", fg=typer.colors.YELLOW)
        return

    for record in records:
        typer.secho(
            f"  {record.created_at:%Y-%m-%d %H:%M}  {record.name} <{record.email}>: {record.response.value}",
            fg=typer.colors.BLUE,
        )


if __name__ == "__main__":
    app()
