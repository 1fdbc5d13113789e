import logging

import pytest

from rlabs.clipboard_manager import Outcome
from rlabs.exceptions import CapabilityUnavailable, WriteFailed

from .conftest import FakeClipboard, FakeDocument


@pytest.mark.asyncio
async def test_native_copy_shows_then_clears_confirmation(make_session, scheduler):
    clipboard = FakeClipboard()
    session = make_session(clipboard=clipboard)

    assert await session.request_copy("x", 3) is Outcome.SUCCESS
    assert session.current() == 3
    assert session.is_copied(3)
    assert clipboard.written == ["x"]

    scheduler.advance(2.0)
    assert session.current() is None


@pytest.mark.asyncio
async def test_fallback_copy_leaves_no_element(make_session):
    document = FakeDocument()
    session = make_session(clipboard=FakeClipboard(available=False), document=document)

    assert await session.request_copy("x", 1) is Outcome.SUCCESS
    assert len(document.created) == 1
    assert document.removed == document.created
    assert document.attached == []
    assert session.current() == 1


@pytest.mark.asyncio
async def test_no_capability_logs_one_warning(make_session, caplog):
    document = FakeDocument(available=False)
    session = make_session(document=document)

    with caplog.at_level(logging.WARNING):
        assert await session.request_copy("x", 1) is Outcome.FAILED

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert document.created == []
    assert session.current() is None
    assert isinstance(session.last_error, CapabilityUnavailable)


@pytest.mark.asyncio
async def test_failed_copy_clears_previous_confirmation(make_session):
    clipboard = FakeClipboard()
    session = make_session(clipboard=clipboard)
    await session.request_copy("a", 1)

    clipboard.error = WriteFailed("xsel exited with 1")
    assert await session.request_copy("a", 1) is Outcome.FAILED

    assert session.current() is None
    assert isinstance(session.last_error, WriteFailed)


@pytest.mark.asyncio
async def test_disabled_mechanism_never_copies(make_session):
    clipboard = FakeClipboard()
    session = make_session(clipboard=clipboard, preference="none")

    assert await session.request_copy("x", 0) is Outcome.FAILED
    assert clipboard.written == []


@pytest.mark.asyncio
async def test_overlap_per_item(make_session, scheduler):
    session = make_session(clipboard=FakeClipboard())

    await session.request_copy("a", 1)
    scheduler.advance_to(0.5)
    await session.request_copy("b", 2)

    scheduler.advance_to(2.0)
    assert session.current() == 2
    scheduler.advance_to(2.5)
    assert session.current() is None


@pytest.mark.asyncio
async def test_overlap_single_indicator(make_session, scheduler):
    session = make_session(clipboard=FakeClipboard(), mode="single")

    await session.request_copy("a", 1)
    scheduler.advance_to(0.5)
    await session.request_copy("b", 2)

    scheduler.advance_to(2.0)
    assert session.current() is None


@pytest.mark.asyncio
async def test_copy_and_completion_are_independent(make_session, scheduler):
    session = make_session(clipboard=FakeClipboard())

    assert session.toggle_completion(4) is True
    await session.request_copy("x", 4)
    assert session.contains(4)

    session.toggle_completion(4)
    assert session.is_copied(4)

    scheduler.advance(2.0)
    assert not session.contains(4)
    assert not session.is_copied(4)


def test_record_outcome_drives_feedback(make_session):
    session = make_session()

    session.record_outcome(6, Outcome.SUCCESS)
    assert session.current() == 6

    session.record_outcome(6, Outcome.FAILED, WriteFailed("no"))
    assert session.current() is None
    assert str(session.last_error) == "no"


def test_close_cancels_timers(make_session, scheduler):
    session = make_session()
    session.record_outcome(1, Outcome.SUCCESS)

    session.close()

    assert scheduler.pending() == []
