"""
Display model for a generated SeTeuk result.

Counts are informational so the teacher can check the draft against the
requested length; nothing here validates the model's output.
"""
import re

from ..models import SeTeukResult

_BYTE_TARGET_RE = re.compile(r'(\d+)바이트')


def utf8_byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def length_target(length_option: str):
    """Byte target named in a length option label, e.g. 1500 for the standard option."""
    match = _BYTE_TARGET_RE.search(length_option or "")
    return int(match.group(1)) if match else None


def render_result(result: SeTeukResult, length_option: str = None) -> dict:
    """Flatten a result into what the page shows: chips, paragraphs, draft and counts."""
    draft = result.draft
    return {
        "keywords": list(result.analysis.keywords),
        "strengths": result.analysis.strengths,
        "storyline": result.analysis.storyline,
        "draft": draft,
        "char_count": len(draft),
        "byte_count": utf8_byte_length(draft),
        "byte_target": length_target(length_option),
    }
