"""Tests for HUD formatting and the ASCII renderer."""

from mazechase.entities import PursuerSpawn
from mazechase.renderers import (
    AsciiRenderer,
    format_hud,
    format_lives,
    format_score,
    render_ascii_frame,
)
from mazechase.simulation import Simulation, new_game


def test_score_is_zero_padded():
    assert format_score(0) == "SCORE 00000"
    assert format_score(1230) == "SCORE 01230"
    assert format_lives(3) == "LIVES 3"


def test_ascii_frame_draws_maze_entities_and_hud():
    sim = Simulation(new_game(lives=3))
    frame = sim.snapshot()
    lines = render_ascii_frame(sim.state.grid, frame).splitlines()

    assert len(lines) == 31 + 1
    assert lines[0] == "#" * 28
    assert lines[23][13] == "@"
    assert lines[11][13] == "B"
    assert lines[1][1] == "."
    assert lines[3][1] == "o"
    assert lines[12][13] == "="
    assert lines[-1] == format_hud(frame) == "SCORE 00000  LIVES 3"


def test_eaten_pellets_disappear_from_ascii_frame():
    sim = Simulation(new_game(pursuers=()))
    sim.state.collectibles.consume((1, 1))
    lines = render_ascii_frame(sim.state.grid, sim.snapshot()).splitlines()
    assert lines[1][1] == " "


def test_paused_frame_shows_paths_and_banner():
    spawn = PursuerSpawn("Blinky", "#ff0000", (13, 11))
    sim = Simulation(new_game(player_tile=(12, 23), player_speed=0, pursuers=[spawn]))
    sim.advance(1 / 64)
    sim.toggle_pause()

    text = render_ascii_frame(sim.state.grid, sim.snapshot())
    assert text.splitlines()[-1].startswith("PAUSED")
    assert "*" in text


def test_ascii_renderer_throttles_running_frames_and_prints_pause_once():
    written = []
    sim = Simulation(new_game(pursuers=()))
    renderer = AsciiRenderer(sim.state.grid, every=2, write=written.append)

    for _ in range(4):
        sim.advance(1 / 64)
        renderer.render(sim.snapshot())
    # Ticks 1..4, every other one written.
    assert len(written) == 2

    sim.toggle_pause()
    renderer.render(sim.snapshot())
    renderer.render(sim.snapshot())
    assert len(written) == 3
