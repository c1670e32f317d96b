"""Rendu markdown -> HTML"""

import logging
import re

from markdown import Markdown

logger = logging.getLogger(__name__)

# un retour à la ligne simple entre deux mots = <br> (comme sur GitHub)
_SOFT_BREAK_RE = re.compile(r"(\S)\n(\S)")

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


class RenderError(Exception):
    pass


def render(markdown_text: str) -> str:
    content = _SOFT_BREAK_RE.sub(r"\1  \n\2", markdown_text)
    md = Markdown(extensions=MARKDOWN_EXTENSIONS)
    try:
        return md.convert(content)
    except Exception as e:
        logger.error(f"render: {e}")
        raise RenderError(str(e)) from e
