"""Rendering package - export only."""

from .renderer import TemplateRenderer, get_renderer

__all__ = ["TemplateRenderer", "get_renderer"]
