import html

import bleach


def clean_text(value) -> str:
    """Trim ``value`` and drop any markup, keeping the plain text as typed.

    ``bleach`` escapes ``&`` and ``<`` in the text it keeps; the API stores
    and returns plain text, so the escaping is undone.
    """
    cleaned = bleach.clean((value or '').strip(), tags=set(), attributes={}, strip=True)
    return html.unescape(cleaned).strip()
