from __future__ import annotations

from types import SimpleNamespace

import pytest

from game.crossing.session import GameSession

try:
    from game.crossing.window import CrossingWindow
except Exception as exc:  # arcade needs a display backend
    pytest.skip(f"arcade unavailable: {exc}", allow_module_level=True)


def test_interactive_update_drains_events_after_tick() -> None:
    session = GameSession(seed=0)
    seen = []
    session.events.subscribe(seen.append)
    window = SimpleNamespace(interactive=True, session=session)

    session.player.y = 15
    CrossingWindow.on_update(window, 1 / 60)

    assert [e.sound for e in seen] == ["cheer"]
    assert len(session.events) == 0


def test_non_interactive_update_leaves_session_alone() -> None:
    session = GameSession(seed=0)
    window = SimpleNamespace(interactive=False, session=session)

    CrossingWindow.on_update(window, 1 / 60)

    assert session.frame == 0
