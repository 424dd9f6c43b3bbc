"""Markup sanitizers for user-supplied text.

Both functions are backed by nh3 (ammonia). Output is serialized HTML, so
re-sanitizing an already clean value returns it unchanged.
"""

import nh3

# Removed together with everything inside them.
_DROP_WITH_CONTENT = {"script", "style"}

# ── Rich text allow-list ──────────────────────────────────────────────

RICH_TEXT_TAGS = {
    "a",
    "b",
    "blockquote",
    "br",
    "code",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "li",
    "ol",
    "p",
    "pre",
    "s",
    "span",
    "strong",
    "sub",
    "sup",
    "u",
    "ul",
}

RICH_TEXT_ATTRIBUTES = {
    "a": {"href", "title"},
}

RICH_TEXT_URL_SCHEMES = {"http", "https", "mailto"}


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def sanitize_plain_text(value: object) -> str:
    """Strip every tag, keeping visible text.

    Script and style elements disappear with their content; any other tag is
    unwrapped. Text without ``<`` cannot hold markup and is returned as typed,
    so URLs with query strings and ``&`` survive. ``None`` becomes an empty
    string.
    """
    text = _as_text(value)
    if "<" not in text:
        return text
    cleaned = nh3.clean(text, tags=set(), clean_content_tags=_DROP_WITH_CONTENT)
    # nh3 output never holds a literal "<", so undoing these two escapes
    # keeps the result free of markup and a fixed point of this function.
    return cleaned.replace("&nbsp;", "\u00a0").replace("&amp;", "&")


def sanitize_rich_text(value: object) -> str:
    """Keep allow-listed formatting markup, remove everything else.

    Event-handler attributes are dropped and links may only point to
    http(s) or mailto targets.
    """
    text = _as_text(value)
    if not text:
        return ""
    return nh3.clean(
        text,
        tags=RICH_TEXT_TAGS,
        clean_content_tags=_DROP_WITH_CONTENT,
        attributes=RICH_TEXT_ATTRIBUTES,
        url_schemes=RICH_TEXT_URL_SCHEMES,
    )
