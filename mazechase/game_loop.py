"""
Frame loop.

Coordinates each tick on a single asyncio event loop:
1. Poll input sources and drain the command queue (direction buffering, pause)
2. Measure the frame delta
3. Advance the simulation (skipped internally while paused)
4. Render the frame snapshot
5. Notify tick listeners

Input never mutates entities directly. Every command goes through one queue
with this loop as its only consumer, so entity and pause state are only ever
touched from the tick. Threads that produce input must use
``submit_threadsafe``.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, List, Optional

from .config import Config
from .logging_utils import log_error, log_info, log_success
from .renderers import InputSource, Renderer
from .schemas import FrameSnapshot
from .simulation import Command, RunState, Simulation

TickListener = Callable[[int, FrameSnapshot], None]


class FrameClock:
    """Seconds elapsed between successive ``tick`` calls (0.0 on the first)."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter):
        self._time = time_source
        self._last: Optional[float] = None

    def tick(self) -> float:
        now = self._time()
        dt = 0.0 if self._last is None else now - self._last
        self._last = now
        return dt


class GameLoop:
    """Runs a ``Simulation`` against renderers and input sources."""

    def __init__(
        self,
        simulation: Simulation,
        *,
        renderers: Optional[List[Renderer]] = None,
        input_sources: Optional[List[InputSource]] = None,
        tick_listeners: Optional[List[TickListener]] = None,
        clock: Optional[FrameClock] = None,
        fps: Optional[float] = None,
    ):
        """Initialize the loop.

        Args:
            simulation: Controller owning the game state
            renderers: Drawn to once per tick with the frame snapshot
            input_sources: Polled at the start of every tick
            tick_listeners: Called after rendering with (tick, snapshot)
            clock: Frame clock; defaults to wall time
            fps: Target frame rate; 0 disables throttling (headless runs, tests)
        """
        self.simulation = simulation
        self.renderers = renderers or []
        self.input_sources = input_sources or []
        self.tick_listeners = tick_listeners or []
        self.clock = clock or FrameClock()
        fps = Config.FPS if fps is None else fps
        self.frame_interval = 1.0 / fps if fps > 0 else 0.0
        self.commands: asyncio.Queue[Command] = asyncio.Queue()
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def submit(self, command: Command) -> None:
        """Queue a command from code running on the loop's own thread."""
        self.commands.put_nowait(command)

    def submit_threadsafe(self, command: Command) -> None:
        """Queue a command from another thread."""
        if self._loop is None:
            raise RuntimeError("GameLoop is not running; use submit() before run()")
        self._loop.call_soon_threadsafe(self.commands.put_nowait, command)

    async def run(self, num_ticks: Optional[int] = None):
        """Run until a QUIT command or until ``num_ticks`` ticks have completed.

        Returns:
            The final ``SimulationState``

        Raises:
            Exception: Anything raised inside a tick, after logging it
        """
        self._loop = asyncio.get_running_loop()
        state = self.simulation.state
        log_info(
            f"Starting game: {len(state.pursuers)} pursuers, "
            f"{state.collectibles.remaining} collectibles"
        )

        tick = 0
        quit_requested = False
        try:
            while num_ticks is None or tick < num_ticks:
                tick += 1
                try:
                    quit_requested = not self._run_tick(tick)
                except Exception as e:
                    log_error(f"Tick {tick} failed: {e}")
                    raise
                if quit_requested:
                    break
                await asyncio.sleep(self.frame_interval)
        finally:
            self._loop = None
            for renderer in self.renderers:
                renderer.close()
            for source in self.input_sources:
                source.close()

        reason = "quit requested" if quit_requested else f"{tick} ticks"
        log_success(f"Game finished ({reason}); score {self.simulation.state.score}")
        return self.simulation.state

    def _drain_commands(self) -> bool:
        """Apply queued commands in arrival order. Returns False on QUIT."""
        for source in self.input_sources:
            for command in source.poll():
                self.commands.put_nowait(command)

        keep_running = True
        while not self.commands.empty():
            command = self.commands.get_nowait()
            if command is Command.QUIT:
                keep_running = False
                continue
            self.simulation.apply_command(command)
            if command is Command.TOGGLE_PAUSE:
                paused = self.simulation.state.run_state is RunState.PAUSED
                log_info("Paused" if paused else "Resumed")
        return keep_running

    def _run_tick(self, tick: int) -> bool:
        if not self._drain_commands():
            return False

        dt = self.clock.tick()
        self.simulation.advance(dt)

        frame = self.simulation.snapshot()
        for renderer in self.renderers:
            renderer.render(frame)
        for listener in self.tick_listeners:
            listener(tick, frame)
        return True
