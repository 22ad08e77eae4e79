"""Command line diagnostics for the widget tree."""
