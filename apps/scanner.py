"""Scanner - bouncing bar with a fading trail, new palette every third sweep."""

from scanmatrix import ScannerApp, run
from scanmatrix.config import load_config

config = load_config()
app = ScannerApp(config)
render = app.render


if __name__ == "__main__":
    width, height = app.size
    try:
        run(render, fps=config.fps, title="Scanner", scale=config.scale,
            width=width, height=height, on_key=app.handle_key)
    finally:
        app.close()
