from __future__ import annotations

from game.crossing.controls import KEY_CODES, Controls
from game.crossing.session import GameSession


def test_arrow_key_codes_map_to_directions() -> None:
    assert KEY_CODES == {37: "left", 38: "up", 39: "right", 40: "down"}


def test_key_release_moves_player(session: GameSession) -> None:
    controls = Controls(session)
    controls.on_key_release(38)
    assert (session.player.x, session.player.y) == (200, 320)
    controls.on_key_release(37)
    assert (session.player.x, session.player.y) == (100, 320)


def test_unmapped_key_is_ignored(session: GameSession) -> None:
    Controls(session).on_key_release(13)
    assert (session.player.x, session.player.y) == (200, 400)


def test_touch_buttons(session: GameSession) -> None:
    controls = Controls(session)
    controls.up()
    controls.right()
    assert (session.player.x, session.player.y) == (300, 320)
    controls.down()
    controls.left()
    assert (session.player.x, session.player.y) == (200, 400)


def test_custom_key_map_replaces_defaults(session: GameSession) -> None:
    controls = Controls(session, key_map={87: "up"})
    controls.on_key_release(87)
    assert session.player.y == 320
    controls.on_key_release(40)
    assert session.player.y == 320


def test_controls_do_nothing_after_game_over(session: GameSession) -> None:
    session.end_game()
    controls = Controls(session)
    controls.up()
    controls.on_key_release(39)
    assert (session.player.x, session.player.y) == (200, 400)
