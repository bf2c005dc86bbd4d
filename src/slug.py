from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^\w-]+", re.ASCII)


def slugify(text: str) -> str:
    """Derive a URL-safe id from a display name or title.

    Lower-cases, turns every whitespace run into one hyphen, then drops any
    character that is not an ASCII word character or a hyphen.

    No uniqueness check and no length limit; an input made only of stripped
    characters yields "".

    Example:
        >>> slugify("Ledger Bot 3000!")
        'ledger-bot-3000'
    """
    return _NON_SLUG.sub("", _WHITESPACE.sub("-", (text or "").lower()))
