"""
Text Utilities

This module holds the pure string routines used by the transcript pipeline:

- decode_html_entities: decode the fixed set of entities found in captions
- chunk_text: split a transcript into bounded, order-preserving chunks
- clean_formatted_text: normalize whitespace and markdown in LLM output
- extract_video_id: pull an 11-character video id out of a YouTube URL
"""

import re
from typing import List, Optional

DEFAULT_CHUNK_SIZE = 30000

# Only these entities are decoded; anything else is left as-is.
HTML_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
    "&#x27;": "'",
    "&#x2F;": "/",
    "&#x60;": "`",
    "&#x3D;": "=",
}

_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in HTML_ENTITIES))

_VIDEO_ID_PATTERNS = [
    re.compile(
        r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
        r"([^\"&?/\s]{11})"
    ),
    re.compile(r"^([a-zA-Z0-9_-]{11})$"),
]

# Cleanup rules, applied in order by clean_formatted_text
_HEADER_LINE = re.compile(r"^(#{1,6}[ \t].*)$", re.MULTILINE)
_LIST_ITEM_LINE = re.compile(r"^[ \t]*([*-][ \t]+.*?)[ \t]*$", re.MULTILINE)
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_SPACE_BEFORE_PUNCTUATION = re.compile(r"[ \t]+([.,!?:;])")
# A whitespace-delimited token containing "://" is passed through unchanged
_URL_TOKEN = r"(?<!\S)\S*://\S*"
_SENTENCE_END_BEFORE_WORD = re.compile(_URL_TOKEN + r"|([.!?])[ \t]*(?=[A-Z])")
_SEPARATOR_BEFORE_WORD = re.compile(_URL_TOKEN + r"|([,:;])[ \t]*(?=[^\W\d_])")
_HORIZONTAL_WHITESPACE = re.compile(r"[ \t]+")
_SPACES_AROUND_NEWLINE = re.compile(r" *\n *")
_INLINE_BULLET = re.compile(r"([.!?:])[ ]+([*-] )")
_INLINE_CODE_FENCE = re.compile(r"(?<=[^\n])[ ]?(```)")


def decode_html_entities(text: str) -> str:
    """Replace the known HTML entities in text with their literal characters.

    Decoding is a single left-to-right pass, so a double-encoded entity such as
    ``&amp;lt;`` loses exactly one layer of encoding per call.
    """
    return _ENTITY_PATTERN.sub(lambda match: HTML_ENTITIES[match.group(0)], text)


def chunk_text(text: str, max_chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[str]:
    """
    Split text into consecutive chunks of at most max_chunk_size characters.

    Splitting is purely positional and may cut through a word. Joining the
    returned chunks with "" reproduces the input exactly; an empty input
    yields no chunks.

    Args:
        text: Transcript text to split
        max_chunk_size: Maximum characters per chunk (must be positive)

    Returns:
        Ordered list of chunks

    Raises:
        ValueError: If max_chunk_size is not positive
    """
    if max_chunk_size <= 0:
        raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")

    return [
        text[start:start + max_chunk_size]
        for start in range(0, len(text), max_chunk_size)
    ]


def _space_after_punctuation(match: re.Match) -> str:
    if match.group(1) is None:
        return match.group(0)
    return match.group(1) + " "


def clean_formatted_text(text: str) -> str:
    """
    Normalize whitespace and markdown structure in generated text.

    The rules run in a fixed order and later rules rely on the earlier ones:

    1. Surround markdown headers with blank lines
    2. Trim list item lines
    3. Collapse 3+ newlines to a single blank line
    4. Drop whitespace before punctuation, one space after it
    5. Collapse runs of spaces and tabs
    6. Strip spaces next to newlines
    7. Put inline bullets and code fences on their own line
    8. Trim every line and the document itself

    This is a cosmetic pass, not a markdown parser.
    """
    text = _HEADER_LINE.sub(r"\n\1\n", text)
    text = _LIST_ITEM_LINE.sub(r"\1", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)

    text = _SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
    text = _SENTENCE_END_BEFORE_WORD.sub(_space_after_punctuation, text)
    text = _SEPARATOR_BEFORE_WORD.sub(_space_after_punctuation, text)

    text = _HORIZONTAL_WHITESPACE.sub(" ", text)
    text = _SPACES_AROUND_NEWLINE.sub("\n", text)

    text = _INLINE_BULLET.sub(r"\1\n\2", text)
    text = _INLINE_CODE_FENCE.sub(r"\n\1", text)

    lines = [line.strip() for line in text.split("\n")]
    return "\n".join(lines).strip()


def extract_video_id(value: str) -> Optional[str]:
    """Extract a video id from a YouTube URL or a bare 11-character id."""
    value = value.strip()
    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(value)
        if match:
            return match.group(1)
    return None
