"""Scanner app - wires engine, scheduler and grid view into a render(canvas, t, frame) callback."""

from scanmatrix.canvas import Canvas
from scanmatrix.config import Config
from scanmatrix.engine import GridDimensions, ScannerEngine
from scanmatrix.scheduler import Scheduler
from scanmatrix.view import GridView


class ScannerApp:
    """Elapsed time passed to render() is the only clock, so a given t sequence always yields the same frames."""

    def __init__(self, config: Config = Config()):
        self.config = config
        self.grid = GridDimensions(config.width, config.height)
        self.scheduler = Scheduler()
        self.engine = ScannerEngine(self.scheduler, self.grid,
                                    tick_ms=config.tick_ms, dwell_ms=config.dwell_ms,
                                    catch_up=False)
        self.view = GridView(self.grid, cell_size=config.cell_size)
        self._last_t: float | None = None
        self.engine.start()

    @property
    def size(self) -> tuple[int, int]:
        return self.view.size

    def render(self, canvas: Canvas, t: float, frame: int) -> None:
        dt = 0.0 if self._last_t is None else max(0.0, t - self._last_t)
        self._last_t = t
        self.scheduler.advance_to(t * 1000.0)
        self.view.update(self.engine.snapshot(), dt)
        self.view.draw(canvas)

    def handle_key(self, key: str) -> None:
        if key == "space":
            running = self.engine.toggle()
            print(f"[scanner] {'Resumed' if running else 'Paused'}")

    def close(self) -> None:
        self.engine.close()
        self.scheduler.cancel_all()
