"""
Request Builder
===============
Turns a SeTeukInput into the payload for one Gemini call.

Text uploads (.txt or text/* MIME type) are decoded and embedded in the
prompt under a filename header so the model reads them as prose. Every
other upload (images, PDFs, audio) is passed through as an inline binary
part with its original MIME type. The user prompt always goes last.
"""
import base64
import binascii
import logging

from ..config import (
    GEMINI_MODEL, GEMINI_TEMPERATURE, RESPONSE_MIME_TYPE, TEXT_FILE_EXTENSIONS,
)
from ..errors import DecodeError
from ..models import SeTeukInput, UploadedFile
from ..prompt_config import (
    SYSTEM_INSTRUCTION, USER_PROMPT_TEMPLATE, RESPONSE_SCHEMA,
    TEXT_FILE_BLOCK, ATTACHED_TEXT_SECTION,
    NO_ACTIVITY_PLACEHOLDER, NO_COMMENTS_PLACEHOLDER, DEFAULT_EMPHASIS_KEYWORD,
)

logger = logging.getLogger(__name__)

FALLBACK_TEXT_MIME_TYPE = "text/plain"


def is_text_file(file: UploadedFile) -> bool:
    """Check whether an upload should be read as text rather than sent as a blob."""
    if (file.mime_type or "").startswith("text"):
        return True
    return file.name.lower().endswith(TEXT_FILE_EXTENSIONS)


def decode_text_file(file: UploadedFile) -> str:
    """Decode a base64 upload to a UTF-8 string, raising DecodeError on failure."""
    try:
        raw = base64.b64decode(file.data, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Could not decode {file.name}: {e}") from e


def inline_part(data: str, mime_type: str) -> dict:
    return {"inline_data": {"data": data, "mime_type": mime_type}}


def text_part(text: str) -> dict:
    return {"text": text}


def build_user_prompt(submission: SeTeukInput, attached_text: str = "") -> str:
    """Fill the user prompt template, substituting placeholders for empty fields."""
    return USER_PROMPT_TEMPLATE.format(
        activity_data=submission.activity_data or NO_ACTIVITY_PLACEHOLDER,
        attached_text=ATTACHED_TEXT_SECTION.format(attached=attached_text) if attached_text else "",
        teacher_comments=submission.teacher_comments or NO_COMMENTS_PLACEHOLDER,
        length_option=submission.length_option,
        emphasis_keywords=", ".join(submission.emphasis_keywords) or DEFAULT_EMPHASIS_KEYWORD,
    )


def build_parts(submission: SeTeukInput) -> list:
    """
    Build the ordered content parts for a submission.

    Returns:
        List of part dicts: every binary attachment in upload order,
        followed by a single text part holding the user prompt.
    """
    parts = []
    attached_text = ""

    for file in submission.files:
        if is_text_file(file):
            try:
                content = decode_text_file(file)
            except DecodeError as e:
                # Let the model try to read it as a plain-text blob instead
                logger.warning("%s; sending as %s attachment", e, FALLBACK_TEXT_MIME_TYPE)
                parts.append(inline_part(file.data, FALLBACK_TEXT_MIME_TYPE))
                continue
            attached_text += TEXT_FILE_BLOCK.format(name=file.name, content=content)
        else:
            parts.append(inline_part(file.data, file.mime_type))

    parts.append(text_part(build_user_prompt(submission, attached_text)))
    return parts


def build_request(submission: SeTeukInput) -> dict:
    """
    Build the full Gemini request for a submission.

    The caller must have rejected empty submissions already.
    """
    parts = build_parts(submission)
    logger.info(
        "Built request: %d file(s), %d binary part(s), %d keyword(s), length=%s",
        len(submission.files), len(parts) - 1,
        len(submission.emphasis_keywords), submission.length_option,
    )
    return {
        "model": GEMINI_MODEL,
        "contents": parts,
        "system_instruction": SYSTEM_INSTRUCTION,
        "generation_config": {
            "response_mime_type": RESPONSE_MIME_TYPE,
            "response_schema": RESPONSE_SCHEMA,
            "temperature": GEMINI_TEMPERATURE,
        },
    }
