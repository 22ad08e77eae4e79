"""Exceptions raised by the widget tree."""


class TextVisionError(Exception):
    """Base class for textvision errors."""


class WidgetTreeError(TextVisionError, ValueError):
    """A widget tree operation would leave the tree inconsistent."""
