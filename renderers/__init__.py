"""
Page renderers for classified channel videos.
"""

from .base import PageRenderer
from .html_page import HtmlPageRenderer, PageTemplateError, DEFAULT_PAGE_TEMPLATE

__all__ = [
    "PageRenderer",
    "HtmlPageRenderer",
    "PageTemplateError",
    "DEFAULT_PAGE_TEMPLATE"
]
