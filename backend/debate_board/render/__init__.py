from .sink import RenderSink
from .text import TextRenderer, format_date

__all__ = ["RenderSink", "TextRenderer", "format_date"]
