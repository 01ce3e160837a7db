"""
Main simulator module driving the daily drop experiment.

Each simulated day drops a point uniformly on the sphere, retries while it
lands on land, and records the first ocean hit with its zone, distance to
the coast and surface temperature.
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional

import numpy as np

from .config import SimulationConfig, speed_to_delay_ms
from .drop import Drop, DropHistory, describe
from .sampling import sample_point
from .statistics import RunningStatistics, StatisticsSnapshot
from .temperature import sea_surface_temperature


class RunMode(str, Enum):
    IDLE = "Idle"
    RUNNING = "Running"
    PAUSED = "Paused"
    FINISHED = "Finished"


class SimulationListener:
    """
    Receives simulator notifications.

    Subclass and override the hooks you need; the defaults do nothing.
    Statistics are passed as read-only snapshots.
    """

    def on_tick(self, drop: Optional[Drop], stats: StatisticsSnapshot):
        """Called after each day, with ``drop`` None if no drop was recorded."""

    def on_finish(self, simulator: "OceanSimulator"):
        """Called once when the last day has been recorded."""

    def on_retry_exhausted(self, day: int, attempts: int):
        """Called when every attempt of a day hit land."""


class _CallbackListener(SimulationListener):

    def __init__(self, on_tick: Optional[Callable] = None, on_finish: Optional[Callable] = None):
        self._on_tick = on_tick
        self._on_finish = on_finish

    def on_tick(self, drop, stats):
        if self._on_tick:
            self._on_tick(drop, stats)

    def on_finish(self, simulator):
        if self._on_finish:
            self._on_finish(simulator)


class OceanSimulator:
    """
    Monte Carlo ocean drop simulator.

    The simulator owns the drop history and running statistics and moves
    between the Idle, Running, Paused and Finished modes. It does not own a
    clock: a host calls ``tick()`` at whatever cadence it likes, or uses
    ``run()`` which sleeps ``delay`` seconds between ticks.
    """

    def __init__(
        self,
        terrain,
        config: Optional[SimulationConfig] = None,
        rng: Optional[np.random.Generator] = None,
        on_tick: Optional[Callable] = None,
        on_finish: Optional[Callable] = None
    ):
        """
        Initialize the simulator.

        Args:
            terrain: Object with ``classify(lon, lat)`` returning a TerrainInfo
            config: Run configuration (defaults to SimulationConfig())
            rng: Random generator; seeded from ``config.seed`` if None
            on_tick: Optional callback function(drop, stats)
            on_finish: Optional callback function(simulator)
        """
        self.config = (config or SimulationConfig()).validate()
        self.terrain = terrain
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.delay_ms = self.config.delay_ms

        self._listeners: List[SimulationListener] = []
        if on_tick or on_finish:
            self.add_listener(_CallbackListener(on_tick, on_finish))

        self._mode = RunMode.IDLE
        self._history = DropHistory()
        self._stats = RunningStatistics()

    # ------------------------------------------------------------------ state

    @property
    def total_days(self) -> int:
        return self.config.total_days

    @property
    def current_day(self) -> int:
        return len(self._history)

    @property
    def mode(self) -> RunMode:
        return self._mode

    @property
    def is_running(self) -> bool:
        return self._mode is RunMode.RUNNING

    @property
    def stats(self) -> StatisticsSnapshot:
        return self._stats.snapshot()

    @property
    def drops(self):
        """Snapshot of the full, day-ordered drop history."""
        return self._history.as_tuple()

    @property
    def history(self) -> DropHistory:
        return self._history

    @property
    def delay(self) -> float:
        """Delay between ticks in seconds."""
        return self.delay_ms / 1000.0

    def add_listener(self, listener: SimulationListener):
        self._listeners.append(listener)

    def remove_listener(self, listener: SimulationListener):
        self._listeners.remove(listener)

    # ------------------------------------------------------------ transitions

    def start(self) -> bool:
        """
        Start or resume the run.

        A paused run whose days are all recorded finishes instead.

        Returns:
            True if the simulator is now running
        """
        if self._mode is RunMode.PAUSED and self.current_day >= self.total_days:
            # Paused right after the last day was recorded
            self._finish()
            return False
        if self._mode in (RunMode.IDLE, RunMode.PAUSED) and self.current_day < self.total_days:
            logging.info("Simulation %s at day %d / %d",
                         "resumed" if self._mode is RunMode.PAUSED else "started",
                         self.current_day, self.total_days)
            self._mode = RunMode.RUNNING
        return self.is_running

    def pause(self) -> bool:
        """Pause a running simulation; takes effect before the next tick."""
        if self._mode is RunMode.RUNNING:
            self._mode = RunMode.PAUSED
            logging.info("Simulation paused at day %d", self.current_day)
            return True
        return False

    def reset(self):
        """Discard all drops and statistics and return to Idle."""
        self._mode = RunMode.IDLE
        self._history.clear()
        self._stats = RunningStatistics()
        logging.info("Simulation reset")
        self._notify_tick(None)

    def set_speed(self, speed: float):
        """
        Set the tick delay from a 1-100 speed control.

        1 = slow (200 ms), 100 = fast (1 ms)
        """
        self.delay_ms = speed_to_delay_ms(speed)

    def _finish(self):
        self._mode = RunMode.FINISHED
        logging.info("Simulation finished after %d days (%d attempts, %d on land)",
                     self.current_day, self._stats.total_attempts, self._stats.land_attempts)
        for listener in list(self._listeners):
            listener.on_finish(self)

    # ------------------------------------------------------------- stepping

    def simulate_day(self) -> Optional[Drop]:
        """
        Compute one day.

        Points are drawn until one lands in the ocean or the attempt budget
        is spent. Land hits are counted as they happen; the drop and its
        statistics are recorded together once an ocean point is found.

        Days are only computed while the run is Running or Paused; an Idle
        or Finished simulator is left untouched.

        Returns:
            The new Drop, or None if every attempt hit land, all days are
            already done or the run is not active
        """
        if self._mode not in (RunMode.RUNNING, RunMode.PAUSED):
            logging.warning("Ignoring simulate_day() while %s", self._mode.value)
            return None
        if self.current_day >= self.total_days:
            return None

        max_attempts = self.config.max_attempts
        for _ in range(max_attempts):
            lon, lat = sample_point(self.rng)
            info = self.terrain.classify(lon, lat)

            if info.is_land:
                self._stats.record_land_attempt()
                continue

            drop = Drop(
                day=self.current_day + 1,
                lon=lon,
                lat=lat,
                zone=info.zone,
                distance_km=info.distance_km,
                temp=sea_surface_temperature(lat),
            )
            self._history.append(drop)
            self._stats.record_drop(drop)
            logging.debug(describe(drop))
            return drop

        logging.warning("Could not find water point after %d attempts!", max_attempts)
        for listener in list(self._listeners):
            listener.on_retry_exhausted(self.current_day + 1, max_attempts)
        return None

    def tick(self) -> bool:
        """
        Run one scheduled tick.

        While running, simulates one day and notifies listeners; finishes
        the run once the last day is recorded.

        Returns:
            True if the host should schedule another tick
        """
        if self._mode is not RunMode.RUNNING:
            return False

        if self.current_day >= self.total_days:
            self._finish()
            return False

        drop = self.simulate_day()
        self._notify_tick(drop)

        # A listener may have paused on the last day; the run is still over
        if self._mode in (RunMode.RUNNING, RunMode.PAUSED) and self.current_day >= self.total_days:
            self._finish()
        return self._mode is RunMode.RUNNING

    def run(
        self,
        max_ticks: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep
    ) -> int:
        """
        Start the simulation and tick until it stops.

        Args:
            max_ticks: Optional limit on the number of ticks
            sleep: Function used to wait ``delay`` seconds between ticks

        Returns:
            Number of ticks executed
        """
        ticks = 0
        if not self.start():
            return ticks

        while max_ticks is None or ticks < max_ticks:
            ticks += 1
            if not self.tick():
                break
            sleep(self.delay)
        return ticks

    def _notify_tick(self, drop: Optional[Drop]):
        snapshot = self._stats.snapshot()
        for listener in list(self._listeners):
            listener.on_tick(drop, snapshot)

    # ----------------------------------------------------------- reporting

    def get_statistics(self) -> dict:
        """
        Get simulation statistics.

        Returns:
            Dictionary with statistics
        """
        stats = self._stats
        return {
            "current_day": self.current_day,
            "total_days": self.total_days,
            "mode": self._mode.value,
            "water_count": stats.water_count,
            "coastal_count": stats.coastal_count,
            "total_attempts": stats.total_attempts,
            "land_attempts": stats.land_attempts,
            "avg_temp": stats.avg_temp,
            "water_fraction": stats.water_fraction,
        }
