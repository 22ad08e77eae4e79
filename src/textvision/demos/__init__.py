"""Demo windows used by the command line tools."""

from textvision.demos.editor_window import EditorWindow

__all__ = ["EditorWindow"]
