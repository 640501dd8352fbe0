"""Scanner engine - bouncing head, fading trail, palette change every third sweep.

advance(), band_at() and color_at() are plain functions over a ScanState so
they can be exercised without any timers. ScannerEngine owns the state and
the timer handles and is the only thing that mutates it.
"""

from dataclasses import dataclass, replace

from scanmatrix.palettes import PALETTES, BAND_COUNT, Color, Palette
from scanmatrix.scheduler import Scheduler, TaskHandle

TICK_MS = 130
DWELL_MS = 1000
SWEEPS_PER_COLOR = 3
GLOW_BANDS = 3

# rel (distance ahead of the head, in the direction of travel) -> band
_BANDS = {1: 0, 0: 0, -1: 1, -2: 2, -3: 3, -4: 4, -5: 5}


@dataclass(frozen=True)
class GridDimensions:
    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")


@dataclass
class ScanState:
    position: int = 0
    direction: int = 1
    palette_index: int = 0
    sweep_count: int = 0
    transitioning: bool = False


def advance(state: ScanState, grid: GridDimensions) -> bool:
    """Move the head one cell. Returns True if it bounced off an edge."""
    new_position = state.position + state.direction
    if state.direction == 1 and new_position >= grid.width - 1:
        state.position = grid.width - 1
        state.direction = -1
    elif state.direction == -1 and new_position <= 0:
        state.position = 0
        state.direction = 1
    else:
        state.position = new_position
        return False
    state.sweep_count += 1
    return True


def band_at(x: int, state: ScanState) -> int | None:
    """Trail band for column x, or None for background."""
    if state.direction == 1:
        rel = x - state.position
    else:
        rel = state.position - x
    return _BANDS.get(rel)


def color_at(x: int, state: ScanState, palettes=PALETTES) -> Color | None:
    band = band_at(x, state)
    if band is None:
        return None
    return palettes[state.palette_index].colors[band]


def is_glowing(band: int | None) -> bool:
    return band is not None and band < GLOW_BANDS


class ScannerEngine:
    """Owns the ScanState and the tick/clear timers on a Scheduler."""

    def __init__(self, scheduler: Scheduler, grid: GridDimensions = GridDimensions(20, 15),
                 palettes: tuple[Palette, ...] = PALETTES,
                 tick_ms: float = TICK_MS, dwell_ms: float = DWELL_MS,
                 catch_up: bool = True):
        if not palettes:
            raise ValueError("At least one palette is required")
        for p in palettes:
            if len(p.colors) != BAND_COUNT:
                raise ValueError(f"Palette {p.name!r} needs {BAND_COUNT} colors")
        self.scheduler = scheduler
        self.grid = grid
        self.palettes = tuple(palettes)
        self.tick_ms = tick_ms
        self.dwell_ms = dwell_ms
        # False drops ticks missed during a stall instead of replaying them
        self.catch_up = catch_up
        self.state = ScanState()
        self._ticker: TaskHandle | None = None
        self._clears: list[TaskHandle] = []

    # --- Timers ---

    @property
    def running(self) -> bool:
        return self._ticker is not None and self._ticker.active

    def start(self) -> None:
        """(Re)arm the tick timer. Any previous ticker is cancelled first."""
        self.stop()
        self._ticker = self.scheduler.call_every(self.tick_ms, self.tick, self.catch_up)

    def stop(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    pause = stop
    resume = start

    def toggle(self) -> bool:
        """Pause if running, resume otherwise. Returns the new running state."""
        if self.running:
            self.pause()
        else:
            self.resume()
        return self.running

    def close(self) -> None:
        self.stop()
        for handle in self._clears:
            handle.cancel()
        self._clears.clear()

    # --- State machine ---

    def tick(self) -> None:
        if advance(self.state, self.grid):
            self._maybe_change_color()

    def _maybe_change_color(self) -> None:
        if self.state.sweep_count % SWEEPS_PER_COLOR != 0:
            return
        old = self.palettes[self.state.palette_index]
        self.state.palette_index = (self.state.palette_index + 1) % len(self.palettes)
        self.state.transitioning = True
        print(f"[scanner] Color change: {old.name} -> {self.palette.name}")
        self._clears = [h for h in self._clears if h.active]
        self._clears.append(self.scheduler.call_later(self.dwell_ms, self._end_transition))

    def _end_transition(self) -> None:
        self.state.transitioning = False

    # --- Queries ---

    @property
    def palette(self) -> Palette:
        return self.palettes[self.state.palette_index]

    @property
    def scans_until_color_change(self) -> int:
        return SWEEPS_PER_COLOR - self.state.sweep_count % SWEEPS_PER_COLOR

    def snapshot(self) -> ScanState:
        return replace(self.state)

    def color_at(self, x: int) -> Color | None:
        return color_at(x, self.state, self.palettes)
