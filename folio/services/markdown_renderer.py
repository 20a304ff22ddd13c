"""Render post bodies to HTML with GitHub-flavored extensions.

Rendering stays out of the parser: a ``PostRecord`` keeps its raw markdown and
the presentation layer decides how to turn it into HTML.
"""

import logging
from typing import Tuple

import markdown
from pygments.formatters import HtmlFormatter

from folio.schemas.blog import PostRecord, RenderedPost

logger = logging.getLogger(__name__)

HIGHLIGHT_CLASS = "highlight"

MARKDOWN_EXTENSIONS = [
    "tables",
    "footnotes",
    "attr_list",
    "toc",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    "pymdownx.highlight",
    "pymdownx.superfences",
]


def build_extension_configs(toc_depth: str) -> dict:
    return {
        "toc": {
            "permalink": True,
            "permalink_class": "heading-anchor",
            "toc_depth": toc_depth,
        },
        "pymdownx.tilde": {
            "subscript": False,
        },
        "pymdownx.tasklist": {
            "custom_checkbox": True,
            "clickable_checkbox": False,
        },
        "pymdownx.highlight": {
            "use_pygments": True,
            "css_class": HIGHLIGHT_CLASS,
            "guess_lang": False,
            "noclasses": False,
        },
    }


class MarkdownRenderer:
    def __init__(self, toc_depth: str = "2-4", highlight_style: str = "default"):
        self.highlight_style = highlight_style
        self.md = markdown.Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs=build_extension_configs(toc_depth),
        )

    def render(self, content: str) -> Tuple[str, str]:
        """Convert markdown to ``(html, toc_html)``."""
        self.md.reset()
        html = self.md.convert(content)
        toc = self.md.toc
        self.md.reset()
        return html, toc

    def render_post(self, post: PostRecord) -> RenderedPost:
        html, toc = self.render(post.content)
        logger.debug(f"Rendered post {post.slug} ({len(html)} chars)")
        return RenderedPost(**post.model_dump(), html=html, toc=toc)

    def highlight_css(self) -> str:
        formatter = HtmlFormatter(style=self.highlight_style)
        return formatter.get_style_defs(f".{HIGHLIGHT_CLASS}")
