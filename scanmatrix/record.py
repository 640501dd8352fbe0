"""Record the scanner as an animated GIF by rendering frames headlessly.

Usage: python -m scanmatrix.record [seconds] [output.gif]
Default output: media/scanner.gif under the working directory
"""

import sys
from pathlib import Path

from PIL import Image

from scanmatrix.app import ScannerApp
from scanmatrix.canvas import Canvas
from scanmatrix.config import Config, load_config

# GIF settings
SCALE = 4          # Upscale factor (160*4 = 640px)
DURATION_S = 8.0   # Long enough for three sweeps and a color change
GIF_FPS = 20


def canvas_to_image(canvas: Canvas, scale: int = SCALE) -> Image.Image:
    """Convert a Canvas buffer to a scaled-up PIL Image."""
    img = Image.frombytes("RGB", (canvas.width, canvas.height), canvas.get_buffer())
    if scale > 1:
        img = img.resize(
            (canvas.width * scale, canvas.height * scale),
            Image.NEAREST,
        )
    return img


def render_frames(app: ScannerApp, fps: float = GIF_FPS, duration: float = DURATION_S,
                  scale: int = SCALE) -> list[Image.Image]:
    n_frames = round(duration * fps)
    dt = 1.0 / fps
    width, height = app.size
    canvas = Canvas(width, height)
    frames = []
    for i in range(n_frames):
        app.render(canvas, i * dt, i)
        frames.append(canvas_to_image(canvas, scale))
    return frames


def record(out_path: Path, duration: float = DURATION_S, fps: float = GIF_FPS,
           config: Config = Config()) -> int:
    """Render and save an animated GIF. Returns the number of frames written."""
    app = ScannerApp(config)
    try:
        frames = render_frames(app, fps=fps, duration=duration)
    finally:
        app.close()
    if not frames:
        raise ValueError(f"Duration {duration}s at {fps}fps yields no frames")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[recorder] Saved {out_path} ({len(frames)} frames, {duration}s)")
    return len(frames)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    seconds = float(args[0]) if len(args) > 0 else DURATION_S
    out = Path(args[1]) if len(args) > 1 else Path.cwd() / "media" / "scanner.gif"
    record(out, duration=seconds, config=load_config())


if __name__ == "__main__":
    main()
