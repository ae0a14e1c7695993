"""Tests for NotificationDispatcher."""

import asyncio

import pytest

from src.notifications.dispatcher import NotificationDispatcher
from src.notifications.dtos import ChannelKind, NotificationContent, Recipient
from src.notifications.tests.inmemory_senders import (
    CrashingSender,
    InMemorySender,
    RendezvousSender,
    SlowSender,
)

RECIPIENT = Recipient(id="invitee-1", email="a@b.com", phone="+15551234567")

CONTENT = NotificationContent(
    subject="Hello {email}",
    body="Thank you for signing up!",
    html_body="<p>{email}</p>",
    template_variables={"email": "a@b.com"},
)

BOTH = {ChannelKind.EMAIL, ChannelKind.SMS}


@pytest.mark.asyncio
async def test_dispatch_sends_over_every_requested_channel():
    email = InMemorySender(ChannelKind.EMAIL)
    sms = InMemorySender(ChannelKind.SMS)
    dispatcher = NotificationDispatcher(senders=[email, sms])

    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    assert report.all_delivered
    assert [attempt.channel for attempt in report.attempts] == [ChannelKind.EMAIL, ChannelKind.SMS]
    assert len(email.sent) == 1
    assert len(sms.sent) == 1
    assert report.outcome_for(ChannelKind.EMAIL).handle == "email-1"
    assert report.outcome_for(ChannelKind.SMS).recipient_id == "invitee-1"


@pytest.mark.asyncio
async def test_email_is_rendered_with_subject_and_sms_with_body_only():
    email = InMemorySender(ChannelKind.EMAIL)
    sms = InMemorySender(ChannelKind.SMS)
    dispatcher = NotificationDispatcher(senders=[email, sms])

    await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    email_message = email.sent[0]
    assert email_message.subject == "Hello a@b.com"
    assert email_message.html_body == "<p>a@b.com</p>"
    assert email_message.body == "Thank you for signing up!"

    sms_message = sms.sent[0]
    assert sms_message.subject is None
    assert sms_message.html_body is None
    assert sms_message.body == "Thank you for signing up!"


@pytest.mark.asyncio
async def test_one_failed_channel_does_not_affect_the_other():
    email = InMemorySender(ChannelKind.EMAIL, fail_with="mailbox unavailable")
    sms = InMemorySender(ChannelKind.SMS)
    dispatcher = NotificationDispatcher(senders=[email, sms])

    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    assert not report.all_delivered
    assert len(report.failures) == 1
    assert report.outcome_for(ChannelKind.EMAIL).delivered is False
    assert "mailbox unavailable" in report.outcome_for(ChannelKind.EMAIL).reason
    assert report.outcome_for(ChannelKind.SMS).delivered is True
    assert len(sms.sent) == 1


@pytest.mark.asyncio
async def test_unexpected_sender_exception_is_recorded_as_failure():
    dispatcher = NotificationDispatcher(
        senders=[CrashingSender(ChannelKind.EMAIL), InMemorySender(ChannelKind.SMS)]
    )

    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    assert report.outcome_for(ChannelKind.EMAIL).reason == "provider client crashed"
    assert report.outcome_for(ChannelKind.SMS).delivered is True


@pytest.mark.asyncio
async def test_slow_channel_times_out():
    slow_email = SlowSender(ChannelKind.EMAIL, delay_seconds=1)
    sms = InMemorySender(ChannelKind.SMS)
    dispatcher = NotificationDispatcher(senders=[slow_email, sms], timeout_seconds=0.01)

    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    email_outcome = report.outcome_for(ChannelKind.EMAIL)
    assert email_outcome.delivered is False
    assert email_outcome.reason == "Timed out after 0.01s"
    assert slow_email.sent == []
    assert report.outcome_for(ChannelKind.SMS).delivered is True


@pytest.mark.asyncio
async def test_channel_without_sender_is_reported_as_failed():
    dispatcher = NotificationDispatcher(senders=[InMemorySender(ChannelKind.EMAIL)])

    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    sms_outcome = report.outcome_for(ChannelKind.SMS)
    assert sms_outcome.delivered is False
    assert sms_outcome.reason == "No sender configured for channel 'sms'"
    assert report.outcome_for(ChannelKind.EMAIL).delivered is True
    assert dispatcher.channels == frozenset({ChannelKind.EMAIL})


@pytest.mark.asyncio
async def test_every_dispatch_uses_fresh_message_ids():
    email = InMemorySender(ChannelKind.EMAIL)
    sms = InMemorySender(ChannelKind.SMS)
    dispatcher = NotificationDispatcher(senders=[email, sms])

    first = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)
    second = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    message_ids = {attempt.message_id for attempt in first.attempts + second.attempts}
    assert len(message_ids) == 4
    assert len(email.sent) == 2


@pytest.mark.asyncio
async def test_dispatch_with_no_channels_reports_nothing_delivered():
    dispatcher = NotificationDispatcher(senders=[InMemorySender(ChannelKind.EMAIL)])

    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=[])

    assert report.attempts == ()
    assert not report.all_delivered


@pytest.mark.asyncio
async def test_topics_are_passed_to_the_sender():
    email = InMemorySender(ChannelKind.EMAIL)
    dispatcher = NotificationDispatcher(senders=[email])

    await dispatcher.dispatch(
        RECIPIENT, CONTENT, channels=[ChannelKind.EMAIL], topics=frozenset({"welcome"})
    )

    assert email.sent[0].topics == frozenset({"welcome"})


@pytest.mark.asyncio
async def test_channels_are_sent_concurrently():
    started = []
    email = RendezvousSender(ChannelKind.EMAIL, started=started, expected=2)
    sms = RendezvousSender(ChannelKind.SMS, started=started, expected=2)
    dispatcher = NotificationDispatcher(senders=[email, sms])

    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)

    assert report.all_delivered
    assert sorted(started) == [ChannelKind.EMAIL, ChannelKind.SMS]


@pytest.mark.asyncio
async def test_slow_channels_overlap():
    loop = asyncio.get_running_loop()
    dispatcher = NotificationDispatcher(
        senders=[SlowSender(ChannelKind.EMAIL, 0.3), SlowSender(ChannelKind.SMS, 0.3)]
    )

    started_at = loop.time()
    report = await dispatcher.dispatch(RECIPIENT, CONTENT, channels=BOTH)
    elapsed = loop.time() - started_at

    assert report.all_delivered
    assert elapsed < 0.5


@pytest.mark.asyncio
async def test_template_error_fails_only_that_dispatch_attempt():
    email = InMemorySender(ChannelKind.EMAIL)
    sms = InMemorySender(ChannelKind.SMS)
    dispatcher = NotificationDispatcher(senders=[email, sms])
    broken = NotificationContent(
        subject="Hello {name}",
        body="Thank you for signing up!",
        template_variables={"email": "a@b.com"},
    )

    report = await dispatcher.dispatch(RECIPIENT, broken, channels=BOTH)

    email_outcome = report.outcome_for(ChannelKind.EMAIL)
    assert email_outcome.delivered is False
    assert "name" in email_outcome.reason
    assert email_outcome.summary == "Hello {name}"
    assert email.sent == []
    # The body renders fine, so SMS still goes out
    assert report.outcome_for(ChannelKind.SMS).delivered is True
    assert len(sms.sent) == 1
