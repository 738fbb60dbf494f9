"""
Input Sanitization Module

Normalizes ingredient text received from the host application before it
reaches the parser. Output is plain text; HTML escaping is left to the
template layer.
"""

import re

from constants import MAX_LENGTHS

# Regular whitespace, non-breaking spaces and the Unicode space block
_WHITESPACE = re.compile(r'[\s\u00a0\u2000-\u200b\u202f\u3000]+')
_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def clean_ingredient_text(text, max_length=None):
    """
    Clean a single ingredient line.

    Args:
        text: Ingredient line (can be None or a non-string)
        max_length: Maximum length (default MAX_LENGTHS['ingredient_text'])

    Returns:
        The line with whitespace collapsed, control characters removed,
        trimmed and truncated
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    if max_length is None:
        max_length = MAX_LENGTHS['ingredient_text']

    # Collapse whitespace first so tabs and newlines become spaces
    text = _WHITESPACE.sub(' ', text)
    text = _CONTROL_CHARS.sub('', text)
    text = text.strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text
