"""Rendering of train state onto text surfaces and preview images."""

from sl.rendering.emulator import rasterize, save_frame
from sl.rendering.renderer import print_clipped, render
from sl.rendering.surface import Surface, TextSurface

__all__ = ["Surface", "TextSurface", "print_clipped", "rasterize", "render", "save_frame"]
