"""Tests for mdgen.session."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from mdgen import session as session_module
from mdgen.errors import SessionBusyError
from mdgen.models import Category
from mdgen.session import READY_STATUS, GenerationSession


@pytest.fixture
def session():
    with GenerationSession() as generation_session:
        yield generation_session


def test_initial_state(session: GenerationSession) -> None:
    assert session.category is Category.CSHARP
    assert session.markdown == ""
    assert session.status_message == READY_STATUS
    assert not session.can_generate
    assert not session.can_copy


def test_start_without_root_is_rejected(session: GenerationSession) -> None:
    with pytest.raises(ValueError, match="No folder selected"):
        session.start()


def test_successful_run_publishes_markdown(session: GenerationSession, proj: Path) -> None:
    changes: list[str] = []
    session.subscribe(changes.append)
    session.root_path = proj

    assert session.can_generate
    result = session.start().result(timeout=10)

    assert result.startswith("**`a.cs`**")
    assert session.markdown == result
    assert session.status_message == "Converted 3 files!"
    assert not session.is_running
    assert session.can_copy
    assert changes[:2] == ["root_path", "status_message"]
    assert changes[-1] == "is_running"
    assert "markdown" in changes


def test_failed_run_replaces_markdown_with_message(session: GenerationSession, tmp_path: Path) -> None:
    session.root_path = tmp_path / "missing"
    session.category = Category.RUST

    result = session.start().result(timeout=10)

    assert "Directory not found" in result
    assert session.markdown == result
    assert session.status_message == "Error (NotFound)"
    assert not session.is_running


def test_second_start_while_running_is_rejected(
    session: GenerationSession, proj: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    entered = threading.Event()
    release = threading.Event()
    real_collect = session_module.collect_files

    def slow_collect(root, category):
        entered.set()
        release.wait(timeout=10)
        return real_collect(root, category)

    monkeypatch.setattr(session_module, "collect_files", slow_collect)
    session.root_path = proj

    future = session.start()
    assert entered.wait(timeout=10)
    assert session.is_running
    assert not session.can_generate
    with pytest.raises(SessionBusyError):
        session.start()

    release.set()
    future.result(timeout=10)
    assert session.can_generate


def test_copy_pushes_markdown_verbatim(session: GenerationSession, proj: Path) -> None:
    clipboard: list[str] = []
    assert session.copy(clipboard.append) is False

    session.root_path = proj
    session.start().result(timeout=10)

    assert session.copy(clipboard.append) is True
    assert clipboard == [session.markdown]
    assert session.status_message == "Copied to clipboard!"


def test_unexpected_failure_is_reported_as_error(
    session: GenerationSession, proj: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_collect(root, category):
        raise RuntimeError("boom")

    monkeypatch.setattr(session_module, "collect_files", broken_collect)
    session.root_path = proj

    result = session.start().result(timeout=10)

    assert result == "boom"
    assert session.markdown == "boom"
    assert session.status_message == "Error"
    assert not session.is_running
    assert session.can_generate
