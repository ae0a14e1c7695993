"""Tests for the CLI commands, with in-memory collaborators patched in."""

import asyncio
from uuid import uuid4

from typer.testing import CliRunner

import cli
from src.events.dtos import EventDTO
from src.invitees.tests.inmemory_directory import InMemoryIdentityDirectory
from src.notifications.dispatcher import NotificationDispatcher
from src.notifications.dtos import ChannelKind
from src.notifications.tests.inmemory_senders import InMemorySender
from src.rsvp.dtos import RSVPAnswer, RSVPContactDTO
from src.rsvp.tests.inmemory_store import InMemoryEventReadModel, InMemoryRSVPStore

runner = CliRunner()


def test_register_prints_welcome_outcomes(monkeypatch):
    directory = InMemoryIdentityDirectory()
    dispatcher = NotificationDispatcher(
        senders=[InMemorySender(ChannelKind.EMAIL), InMemorySender(ChannelKind.SMS, fail_with="no credit")]
    )
    monkeypatch.setattr(cli, "SqlIdentityDirectory", lambda: directory)
    monkeypatch.setattr(cli, "get_dispatcher", lambda: dispatcher)
    monkeypatch.setattr(cli, "get_welcome_channels", lambda: {ChannelKind.EMAIL, ChannelKind.SMS})

    result = runner.invoke(cli.app, ["register", "a@b.com", "+15551234567"])

    assert result.exit_code == 0
    assert "Invitee registered!" in result.output
    assert "email: sent (email-1)" in result.output
    assert "sms: failed (sms delivery failed: no credit)" in result.output
    assert "a@b.com" in directory.invitees


def test_register_rejects_invalid_phone(monkeypatch):
    directory = InMemoryIdentityDirectory()
    monkeypatch.setattr(cli, "SqlIdentityDirectory", lambda: directory)
    monkeypatch.setattr(
        cli, "get_dispatcher", lambda: NotificationDispatcher(senders=[InMemorySender(ChannelKind.EMAIL)])
    )

    result = runner.invoke(cli.app, ["register", "a@b.com", "5551234567"])

    assert result.exit_code == 1
    assert 'Phone number must start with a "+"' in result.output
    assert directory.create_calls == []


def test_list_rsvps_latest_only(monkeypatch):
    event = EventDTO(id=uuid4(), name="Spring Gala")
    store = InMemoryRSVPStore()
    ada = RSVPContactDTO(name="Ada", email="ada@example.com")

    async def seed():
        await store.append(event_id=event.id, contact=ada, response=RSVPAnswer.GOING)
        await store.append(event_id=event.id, contact=ada, response=RSVPAnswer.NOT_GOING)

    asyncio.run(seed())
    monkeypatch.setattr(cli, "SqlRSVPStore", lambda: store)
    monkeypatch.setattr(cli, "SqlEventReadModel", lambda: InMemoryEventReadModel([event]))

    result = runner.invoke(cli.app, ["list-rsvps", str(event.id), "--latest-only"])

    assert result.exit_code == 0
    assert "Ada <ada@example.com>: not-going" in result.output
    assert ": going" not in result.output


def test_list_rsvps_unknown_event(monkeypatch):
    monkeypatch.setattr(cli, "SqlRSVPStore", lambda: InMemoryRSVPStore())
    monkeypatch.setattr(cli, "SqlEventReadModel", lambda: InMemoryEventReadModel())

    result = runner.invoke(cli.app, ["list-rsvps", str(uuid4())])

    assert result.exit_code == 1
    assert "not found" in result.output
