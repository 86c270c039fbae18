import logging

import pytest

from mpgblog.widgets import COPY_RESET_MS, ClipboardError, CopyLinkButton


class _FakeScheduler:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self, delay, callback):
        self.calls.append((delay, callback))

    def fire(self) -> None:
        for _, callback in self.calls:
            callback()


def test_copy_sets_flag_and_resets_after_delay() -> None:
    scheduler = _FakeScheduler()
    button = CopyLinkButton("/blog/x", origin="https://example.com", schedule=scheduler)
    written = []

    assert button.copy(written.append) is True

    assert written == ["https://example.com/blog/x"]
    assert button.copied is True
    assert [delay for delay, _ in scheduler.calls] == [COPY_RESET_MS / 1000]

    scheduler.fire()
    assert button.copied is False


def test_rejected_write_never_sets_flag(caplog: pytest.LogCaptureFixture) -> None:
    scheduler = _FakeScheduler()
    button = CopyLinkButton("/blog/x", origin="https://example.com", schedule=scheduler)

    def reject(_text: str) -> None:
        raise ClipboardError("permission denied")

    caplog.set_level(logging.ERROR)
    assert button.copy(reject) is False

    assert button.copied is False
    assert scheduler.calls == []
    assert "Failed to copy" in caplog.text


def test_any_clipboard_failure_is_logged_and_ignored(caplog: pytest.LogCaptureFixture) -> None:
    scheduler = _FakeScheduler()
    button = CopyLinkButton("/blog/x", origin="https://example.com", schedule=scheduler)

    def no_mechanism(_text: str) -> None:
        raise RuntimeError("could not find a copy/paste mechanism")

    caplog.set_level(logging.ERROR)
    assert button.copy(no_mechanism) is False

    assert button.copied is False
    assert scheduler.calls == []
    assert "could not find a copy/paste mechanism" in caplog.text
