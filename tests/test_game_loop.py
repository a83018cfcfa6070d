"""Tests for the single-consumer frame loop."""

from __future__ import annotations

import pytest

from mazechase.entities import Direction
from mazechase.game_loop import FrameClock, GameLoop
from mazechase.renderers import InputSource, Renderer
from mazechase.simulation import Command, Simulation, new_game


class FakeTime:
    """Deterministic time source advancing a fixed step per call."""

    def __init__(self, step: float = 1 / 64):
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current


class RecordingRenderer(Renderer):
    def __init__(self):
        self.frames = []
        self.closed = False

    def render(self, frame):
        self.frames.append(frame)

    def close(self):
        self.closed = True


class ScriptedInput(InputSource):
    """Returns one batch of commands per poll, then nothing."""

    def __init__(self, *batches):
        self.batches = list(batches)
        self.closed = False

    def poll(self):
        return self.batches.pop(0) if self.batches else []

    def close(self):
        self.closed = True


class ExplodingRenderer(Renderer):
    def render(self, frame):
        raise RuntimeError("surface lost")


def _loop(**kwargs) -> GameLoop:
    simulation = kwargs.pop("simulation", None) or Simulation(new_game(player_speed=64, pursuers=()))
    return GameLoop(simulation, clock=FrameClock(FakeTime()), fps=0, **kwargs)


def test_frame_clock_measures_deltas():
    times = iter([10.0, 10.016, 10.05])
    clock = FrameClock(lambda: next(times))
    assert clock.tick() == 0.0
    assert clock.tick() == pytest.approx(0.016)
    assert clock.tick() == pytest.approx(0.034)


@pytest.mark.asyncio
async def test_run_ticks_renders_and_notifies_listeners():
    renderer = RecordingRenderer()
    seen = []
    loop = _loop(renderers=[renderer], tick_listeners=[lambda tick, frame: seen.append(tick)])

    state = await loop.run(num_ticks=5)

    assert seen == [1, 2, 3, 4, 5]
    assert len(renderer.frames) == 5
    assert state.frame == 5
    assert renderer.closed


@pytest.mark.asyncio
async def test_quit_stops_before_advancing():
    renderer = RecordingRenderer()
    loop = _loop(renderers=[renderer])
    loop.submit(Command.QUIT)

    state = await loop.run(num_ticks=10)

    assert state.frame == 0
    assert renderer.frames == []
    assert renderer.closed


@pytest.mark.asyncio
async def test_queued_commands_apply_in_order():
    loop = _loop()
    loop.submit(Command.UP)
    loop.submit(Command.DOWN)

    state = await loop.run(num_ticks=1)

    assert state.player.next_direction is Direction.DOWN


@pytest.mark.asyncio
async def test_pause_from_input_source_freezes_simulation():
    renderer = RecordingRenderer()
    source = ScriptedInput([Command.TOGGLE_PAUSE])
    loop = _loop(renderers=[renderer], input_sources=[source])
    start = loop.simulation.state.player.position

    state = await loop.run(num_ticks=4)

    assert state.frame == 0
    assert state.player.position == start
    assert all(frame.paused for frame in renderer.frames)
    assert source.closed


@pytest.mark.asyncio
async def test_tick_errors_propagate_and_release_collaborators():
    source = ScriptedInput()
    loop = _loop(renderers=[ExplodingRenderer()], input_sources=[source])

    with pytest.raises(RuntimeError, match="surface lost"):
        await loop.run(num_ticks=3)
    assert source.closed


def test_submit_threadsafe_requires_running_loop():
    loop = _loop()
    with pytest.raises(RuntimeError):
        loop.submit_threadsafe(Command.LEFT)
