"""
Math-Text Segmenter

Splits a free-form string into plain text, inline math ($ ... $) and
block math (\\[ ... \\]) segments so each can be rendered on its own.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

# Block regions may span lines; inline regions may not.
BLOCK_MATH_RE = re.compile(r"\\\[(.+?)\\\]", re.DOTALL)
INLINE_MATH_RE = re.compile(r"\$(.+?)\$")


class SegmentKind(str, Enum):
    PLAIN = "plain"
    INLINE = "inline"
    BLOCK = "block"


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    text: str

    @classmethod
    def plain(cls, text: str) -> "Segment":
        return cls(SegmentKind.PLAIN, text)

    @classmethod
    def inline(cls, text: str) -> "Segment":
        return cls(SegmentKind.INLINE, text)

    @classmethod
    def block(cls, text: str) -> "Segment":
        return cls(SegmentKind.BLOCK, text)


def _split_inline(text: str) -> List[Segment]:
    """Splits a block-free span into plain and inline math segments."""
    parts: List[Segment] = []
    last = 0

    for match in INLINE_MATH_RE.finditer(text):
        plain = text[last:match.start()].strip()
        if plain:
            parts.append(Segment.plain(plain))
        parts.append(Segment.inline(match.group(1).strip()))
        last = match.end()

    rest = text[last:].strip()
    if rest:
        parts.append(Segment.plain(rest))

    return parts


def segment_math_text(text: Optional[str]) -> List[Segment]:
    """
    Segments `text` in reading order.

    Block math is extracted first, so a `$` inside a block region is never
    treated as an inline delimiter. Gaps between block regions are then
    scanned for inline math. Plain spans are trimmed and dropped when empty.
    Unbalanced delimiters stay in the plain text.
    """
    if not text:
        return []

    source = text.strip()
    parts: List[Segment] = []
    last = 0

    for match in BLOCK_MATH_RE.finditer(source):
        before = source[last:match.start()].strip()
        if before:
            parts.extend(_split_inline(before))
        parts.append(Segment.block(match.group(1).strip()))
        last = match.end()

    remaining = source[last:].strip()
    if remaining:
        parts.extend(_split_inline(remaining))

    return parts


def join_segments(segments: Iterable[Segment]) -> str:
    """
    Rebuilds source text from segments, delimiters reinserted.
    Segments are separated by newlines: inline regions never cross a line
    break, so a stray `$` cannot pair with a delimiter in the next segment.
    """
    pieces = []
    for seg in segments:
        if seg.kind is SegmentKind.BLOCK:
            pieces.append(f"\\[{seg.text}\\]")
        elif seg.kind is SegmentKind.INLINE:
            pieces.append(f"${seg.text}$")
        else:
            pieces.append(seg.text)
    return "\n".join(pieces)
