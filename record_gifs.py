#!/usr/bin/env python3
"""Record the heart animation as an animated GIF by rendering frames headlessly.

Usage: python record_gifs.py
Output: media/demo-heart.gif

HEART_SEED / HEART_FRAMES are honoured the same way as apps/heart.py.
"""

import os
import sys

# Prevent pygame from opening windows or printing its banner
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

from pathlib import Path
from PIL import Image

# Add project root to path
ROOT = Path(__file__).parent
sys.path.insert(0, str(ROOT))

from pulseheart.canvas import Canvas

MEDIA_DIR = ROOT / "media"

# GIF settings
SCALE = 1          # 840x680 is already big enough
GIF_FPS = 12       # Frames per second in the GIF
LOOPS = 2          # Times the precomputed sequence is repeated


def canvas_to_image(canvas: Canvas, scale: int = SCALE) -> Image.Image:
    """Convert a Canvas buffer to a (optionally scaled-up) PIL Image."""
    img = Image.fromarray(canvas.buffer)
    if scale > 1:
        img = img.resize(
            (canvas.width * scale, canvas.height * scale),
            Image.NEAREST,
        )
    return img


def save_gif(out_path: Path, images: list, fps: float = GIF_FPS) -> None:
    images[0].save(
        out_path,
        save_all=True,
        append_images=images[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )


def record_heart(out_dir: Path = MEDIA_DIR, loops: int = LOOPS) -> Path:
    """Render every precomputed frame `loops` times and save as a GIF."""
    import apps.heart as heart

    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "demo-heart.gif"

    canvas = Canvas()
    gen = heart.start(canvas.width, canvas.height).result()
    images = []
    for i in range(gen.frame_count * loops):
        canvas.clear()
        canvas.draw_particles(gen.frames.loop(i), heart.HEART_COLOR)
        images.append(canvas_to_image(canvas))

    save_gif(out_path, images)
    print(f"[record] Saved {out_path} ({len(images)} frames, {len(images) / GIF_FPS:.1f}s)")
    return out_path


RECORDINGS = [
    ("heart", record_heart),
]


if __name__ == "__main__":
    print(f"\nRecording demo GIFs to {MEDIA_DIR}/\n")

    for name, fn in RECORDINGS:
        try:
            print(f"  Recording {name}...")
            fn()
        except Exception as e:
            print(f"  ERROR recording {name}: {e}")
            import traceback
            traceback.print_exc()

    print(f"\nDone! GIFs saved to {MEDIA_DIR}/")
