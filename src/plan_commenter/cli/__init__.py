"""Command-line interface package for the plan commenter."""

from .app import build_parser, load_and_render, main, publish_comment, run

__all__ = [
    "build_parser",
    "load_and_render",
    "main",
    "publish_comment",
    "run",
]
