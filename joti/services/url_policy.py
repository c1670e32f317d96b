"""
Politique d'url - slug depuis le titre, mots réservés
"""

import re

# routes du service: une page ne peut pas les masquer
RESERVED_URLS = frozenset({"howto", "about", "static", "health", "pages", "edit"})

_WHITESPACE_RE = re.compile(r"\s+")
_NOT_SLUG_RE = re.compile(r"[^a-z0-9_]")


def slugify(title: str) -> str:
    """
    "  Hello World! " -> "hello_world"

    Minuscules, trim, espaces -> un seul "_", puis on enlève
    tout ce qui n'est pas [a-z0-9_] (accents compris).
    """
    url = title.strip().lower()
    url = _WHITESPACE_RE.sub("_", url)
    return _NOT_SLUG_RE.sub("", url)


def is_reserved(url: str) -> bool:
    return url in RESERVED_URLS


def auto_url(base_slug: str, numeric_suffix: int) -> str:
    # l'id est unique donc slug+id l'est aussi (sauf url custom identique)
    return f"{base_slug}{numeric_suffix}"
