"""Clipboard conversion package.

Provides `html_to_markdown`, turning pasted HTML into the markdown the
analyzers consume.
"""

from .html_to_markdown import html_to_markdown
