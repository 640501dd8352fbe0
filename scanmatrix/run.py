"""Main run loop - ties together Canvas, Simulator and the scanner app."""

import time
from typing import Callable

from scanmatrix.app import ScannerApp
from scanmatrix.canvas import Canvas
from scanmatrix.config import load_config
from scanmatrix.simulator import KeyFn, Simulator

# Callback type: fn(canvas, time_seconds, frame_number) -> None
RenderFn = Callable[[Canvas, float, int], None]


def run(render: RenderFn, fps: int = 30, title: str = "Scanner",
        scale: int = 5, width: int = 160, height: int = 120,
        on_key: KeyFn | None = None) -> None:
    """Run the render loop with a simulator preview.

    Args:
        render: Callback called each frame with (canvas, elapsed_time, frame_number).
                Draw to the canvas each frame. Canvas is NOT auto-cleared between frames.
        fps: Target frames per second (default 30).
        title: Window title.
        scale: Pixel scale factor for simulator window (default 5 = 800x600).
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        on_key: Called with the pygame key name for every key press except Escape.
    """
    canvas = Canvas(width, height)
    sim = Simulator(canvas, scale=scale, title=title)

    start = time.monotonic()
    frame = 0

    try:
        while True:
            t = time.monotonic() - start
            render(canvas, t, frame)

            if not sim.update(on_key):
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()


def main() -> None:
    config = load_config()
    app = ScannerApp(config)
    width, height = app.size
    print(f"[scanner] {config.width}x{config.height} grid, tick {config.tick_ms}ms, "
          f"dwell {config.dwell_ms}ms. Space pauses, Esc quits.")
    try:
        run(app.render, fps=config.fps, title="Scanner", scale=config.scale,
            width=width, height=height, on_key=app.handle_key)
    finally:
        app.close()


if __name__ == "__main__":
    main()
