"""Rasterize text frames to images for previews without a terminal."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from sl.rendering.surface import TextSurface

CELL_WIDTH = 6
CELL_HEIGHT = 11

COLOR_BACKGROUND = (0, 0, 0)
COLOR_TEXT = (220, 220, 220)


def rasterize(
    surface: TextSurface,
    cell_width: int = CELL_WIDTH,
    cell_height: int = CELL_HEIGHT,
    foreground: tuple[int, int, int] = COLOR_TEXT,
    background: tuple[int, int, int] = COLOR_BACKGROUND,
) -> Image.Image:
    """Draw every non-blank cell of a text surface onto an RGB image."""
    if cell_width < 1 or cell_height < 1:
        raise ValueError(f"Cell size must be positive, got {cell_width}x{cell_height}.")

    image = Image.new("RGB", (surface.width * cell_width, surface.height * cell_height), background)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    # One character per cell keeps columns aligned even with a proportional font.
    for row, line in enumerate(surface.lines()):
        for column, char in enumerate(line):
            if char == " ":
                continue
            draw.text((column * cell_width, row * cell_height), char, font=font, fill=foreground)

    return image


def save_frame(image: Image.Image, path: str = "emulator_output/frame.png") -> None:
    """Save a frame to disk as a PNG image."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path, format="PNG")


__all__ = ["rasterize", "save_frame"]
