"""Typer CLI application for tracing event dispatch through a demo window."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from textvision.application import Application
from textvision.config import Settings
from textvision.demos.editor_window import EditorWindow
from textvision.event.mouse import MouseEvent, MouseEventKind
from textvision.event.resize import ResizeEvent, ResizeEventKind
from textvision.log import configure_logging
from textvision.widgets.base import Widget


class LogLevel(str, Enum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"
    critical = "CRITICAL"


class MouseAction(str, Enum):
    down = "down"
    up = "up"
    motion = "motion"
    double = "double"


class MouseButton(str, Enum):
    left = "left"
    right = "right"
    middle = "middle"
    wheel_up = "wheel-up"
    wheel_down = "wheel-down"


_ACTION_KINDS = {
    MouseAction.down: MouseEventKind.MOUSE_DOWN,
    MouseAction.up: MouseEventKind.MOUSE_UP,
    MouseAction.motion: MouseEventKind.MOUSE_MOTION,
    MouseAction.double: MouseEventKind.MOUSE_DOUBLE_CLICK,
}


def _build_application(
    settings: Settings,
    width: int,
    height: int,
    window_x: int,
    window_y: int,
) -> tuple[Application, EditorWindow]:
    app = Application(width, height)
    window = EditorWindow(border_margin=settings.border_margin)
    window.move_to(window_x, window_y)
    app.add_window(window)
    return app, window


def _tree_table(root: Widget) -> Table:
    table = Table(title=f"{root!r}")
    table.add_column("Widget")
    table.add_column("Rect", justify="right")
    table.add_column("Absolute", justify="right")
    for depth, widget in root.walk():
        r = widget.rect
        table.add_row(
            "  " * depth + type(widget).__name__,
            f"{r.x},{r.y} {r.width}x{r.height}",
            f"{widget.absolute_x},{widget.absolute_y}",
        )
    return table


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="textvision",
        help="Trace mouse and resize dispatch through a text-mode widget tree.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    settings = Settings.from_env()

    @app.callback()
    def setup(
        log_level: Annotated[
            LogLevel,
            typer.Option("--log-level", "-l", case_sensitive=False, help="Logging level"),
        ] = LogLevel(settings.log_level),
    ) -> None:
        """Configure logging before running a command."""
        configure_logging(log_level.value)

    @app.command()
    def trace(
        x: Annotated[int, typer.Argument(help="Screen column")],
        y: Annotated[int, typer.Argument(help="Screen row")],
        action: Annotated[MouseAction, typer.Option("--action", "-a", help="Mouse action")] = MouseAction.down,
        button: Annotated[MouseButton, typer.Option("--button", "-b", help="Mouse button")] = MouseButton.left,
        window_x: Annotated[int, typer.Option("--window-x", help="Window column")] = 0,
        window_y: Annotated[int, typer.Option("--window-y", help="Window row")] = 0,
    ) -> None:
        """Show which widgets a mouse event at screen (X, Y) passes through."""
        application, window = _build_application(settings, 80, 24, window_x, window_y)
        mouse = MouseEvent.from_screen(
            _ACTION_KINDS[action], x, y,
            mouse1=button is MouseButton.left,
            mouse2=button is MouseButton.right,
            mouse3=button is MouseButton.middle,
            mouse_wheel_up=button is MouseButton.wheel_up,
            mouse_wheel_down=button is MouseButton.wheel_down,
        )

        if application.window_at(x, y) is None:
            console.print(f"[yellow]No window at ({x}, {y})[/]")
            raise typer.Exit(1)

        path = window.hit_path(x - window.x, y - window.y)
        consumer = application.dispatch(mouse)

        table = Table(title=str(mouse))
        table.add_column("Widget")
        table.add_column("Absolute", justify="right")
        table.add_column("Relative", justify="right")
        table.add_column("Consumed")
        for depth, (widget, local_x, local_y) in enumerate(path):
            table.add_row(
                "  " * depth + type(widget).__name__,
                f"{widget.absolute_x},{widget.absolute_y}",
                f"{local_x},{local_y}",
                "yes" if widget is consumer else "",
            )
        console.print(table)

        leaf = path[-1][0]
        console.print(str(mouse.translated(leaf.absolute_x, leaf.absolute_y)), soft_wrap=True)
        if consumer is window.editor:
            console.print(f"Cursor: line {window.editor.cursor_y} column {window.editor.cursor_x}")

    @app.command()
    def resize(
        width: Annotated[int, typer.Argument(help="New width")],
        height: Annotated[int, typer.Argument(help="New height")],
        screen: Annotated[bool, typer.Option("--screen", "-s", help="Resize the screen instead of the window")] = False,
    ) -> None:
        """Resize the demo window (or the screen) and show the resulting rectangles."""
        application, window = _build_application(settings, 80, 24, 0, 0)
        if screen:
            event = ResizeEvent(ResizeEventKind.SCREEN, width, height)
            application.dispatch(event)
        else:
            event = ResizeEvent(ResizeEventKind.WIDGET, width, height)
            if not window.resize(width, height):
                console.print(f"[red]{window!r} is not resizable[/]")
                raise typer.Exit(1)

        console.print(str(event), soft_wrap=True)
        console.print(_tree_table(window))

    return app
