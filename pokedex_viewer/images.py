"""Decode record images with Pillow: fitted sprite and faded window backdrop."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from PIL import Image, ImageColor

from pokedex_viewer.pokeapi import fetch_image_bytes
from pokedex_viewer.theme import BACKDROP_OPACITY, BG, IMAGE_SIZE

if TYPE_CHECKING:
    from PIL.ImageTk import PhotoImage


def decode_image(data: bytes, size: int = IMAGE_SIZE) -> Image.Image:
    """Decode PNG/JPEG bytes into an RGBA image fitted (aspect kept) and centred in a size×size square.

    Raises PIL.UnidentifiedImageError (an OSError) for bytes Pillow cannot read.
    """
    with Image.open(io.BytesIO(data)) as src:
        img = src.convert("RGBA")
    # Pixel-art sprites are tiny; NEAREST keeps them crisp when scaled up
    resample = Image.Resampling.NEAREST if max(img.size) < size // 2 else Image.Resampling.LANCZOS
    scale = size / max(img.size)
    fitted = img.resize(
        (max(1, round(img.width * scale)), max(1, round(img.height * scale))),
        resample,
    )
    canvas = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    canvas.paste(fitted, ((size - fitted.width) // 2, (size - fitted.height) // 2), fitted)
    return canvas


def make_backdrop(
    img: Image.Image,
    size: tuple[int, int],
    bg: str = BG,
    opacity: float = BACKDROP_OPACITY,
) -> Image.Image:
    """Scale img to cover size and blend it into the background colour at opacity. Returns RGB."""
    width, height = size
    if width < 1 or height < 1:
        raise ValueError(f"backdrop size must be positive, got {size}")
    src = img.convert("RGBA")
    scale = max(width / src.width, height / src.height)
    scaled = src.resize(
        (max(width, round(src.width * scale)), max(height, round(src.height * scale))),
        Image.Resampling.LANCZOS,
    )
    left = (scaled.width - width) // 2
    top = (scaled.height - height) // 2
    cropped = scaled.crop((left, top, left + width, top + height))

    base = Image.new("RGBA", size, ImageColor.getrgb(bg) + (255,))
    alpha = cropped.getchannel("A").point(lambda a: round(a * max(0.0, min(1.0, opacity))))
    cropped.putalpha(alpha)
    return Image.alpha_composite(base, cropped).convert("RGB")


def load_image(url: str, size: int = IMAGE_SIZE) -> Image.Image:
    """Download and decode a record image. Safe to call off the UI thread."""
    return decode_image(fetch_image_bytes(url), size)


def to_photo(img: Image.Image) -> "PhotoImage":
    """Wrap a Pillow image for Tk. Must be called on the UI thread after Tk() exists."""
    from PIL import ImageTk

    return ImageTk.PhotoImage(img)
