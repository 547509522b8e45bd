import numpy as np
import pytest

from jumpboi.game.entities import ObstacleColor, ObstacleView, SessionSnapshot
from jumpboi.graphics.primitives import fill_rect, hline, new_buffer
from jumpboi.graphics.renderer import (
    ACTOR_COLOR,
    GROUND_COLOR,
    SceneRenderer,
    format_hud,
)


def make_snapshot(**overrides) -> SessionSnapshot:
    values = dict(
        actor_x=20.0,
        actor_y=24.0,
        actor_velocity_y=0.0,
        grounded=True,
        obstacles=(),
        tick_count=0,
        difficulty=1.0,
        score=0,
        game_over=False,
    )
    values.update(overrides)
    return SessionSnapshot(**values)


@pytest.fixture
def renderer(settings):
    return SceneRenderer(settings.playfield)


@pytest.fixture
def buffer():
    return new_buffer(210, 110)


def test_ground_line(renderer, buffer):
    renderer.render(make_snapshot(), buffer)
    assert (buffer[89] == GROUND_COLOR).all()


def test_actor_pixels(renderer, buffer):
    renderer.render(make_snapshot(), buffer)
    assert (buffer[84:86, 20:22] == ACTOR_COLOR).all()
    assert not (buffer[83, 20:22] == ACTOR_COLOR).all()
    assert not (buffer[84:86, 22] == ACTOR_COLOR).all()


def test_obstacle_pixels(renderer, buffer):
    obstacle = ObstacleView(x=100.0, y=24.0, height=10.0, color=ObstacleColor.YELLOW)
    renderer.render(make_snapshot(obstacles=(obstacle,)), buffer)
    assert (buffer[76:86, 100:102] == ObstacleColor.YELLOW.rgb).all()
    assert (buffer[75, 100:102] == 0).all()


def test_flat_obstacle_still_shows(renderer, buffer):
    obstacle = ObstacleView(x=60.0, y=24.0, height=0.0, color=ObstacleColor.CYAN)
    renderer.render(make_snapshot(obstacles=(obstacle,)), buffer)
    assert (buffer[85, 60:62] == ObstacleColor.CYAN.rgb).all()


def test_render_clears_previous_frame(renderer, buffer):
    buffer[:] = 123
    renderer.render(make_snapshot(), buffer)
    assert (buffer[0] == 0).all()


def test_scales_to_small_buffers(renderer):
    small = new_buffer(42, 22)
    renderer.render(make_snapshot(), small)
    assert (small == ACTOR_COLOR).all(axis=-1).any()


def test_fill_rect_clips_at_edges():
    buf = new_buffer(4, 4)
    fill_rect(buf, -2, -2, 4, 4, (9, 9, 9))
    assert (buf[:2, :2] == 9).all()
    assert (buf[2:, :] == 0).all()


def test_hline_spans_the_row():
    buf = new_buffer(5, 3)
    hline(buf, 1, (1, 2, 3))
    assert (buf[1] == (1, 2, 3)).all()
    assert np.count_nonzero(buf[0]) == 0
    assert np.count_nonzero(buf[2]) == 0


def test_hline_off_buffer_is_ignored():
    buf = new_buffer(5, 3)
    hline(buf, 3, (1, 2, 3))
    hline(buf, -1, (1, 2, 3))
    assert np.count_nonzero(buf) == 0


def test_hud_while_running():
    obstacles = (ObstacleView(50.0, 24.0, 3.0, ObstacleColor.RED),) * 2
    lines = format_hud(make_snapshot(score=12, difficulty=1.06, obstacles=obstacles), 30)
    assert lines == ["Score: 12  Best: 30  Speed: x1.06", "Existing Enemies: 2"]


def test_hud_after_death():
    lines = format_hud(make_snapshot(score=3, game_over=True), 3)
    assert lines[1] == "you die - press r to restart"
