"""README rendering adapters."""

from zoorofile.adapters.readme.locales import SUPPORTED_LOCALES, text
from zoorofile.adapters.readme.markdown_renderer import MarkdownReadmeRenderer

__all__ = ["MarkdownReadmeRenderer", "SUPPORTED_LOCALES", "text"]
