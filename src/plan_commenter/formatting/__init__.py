"""Report rendering helpers."""

from .markdown import CHANGE_LABELS, MarkdownFormatter, render_comment

__all__ = ["CHANGE_LABELS", "MarkdownFormatter", "render_comment"]
