"""
Gemini Service
==============
Sends a built request to Google Gemini and parses the structured reply.

One attempt per submission: no retries and no caching. Any SDK or network
failure, and a reply without text, raises ServiceError; a reply that is not
the declared JSON shape raises SchemaError.
"""
import base64
import binascii
import copy
import logging

import google.generativeai as genai

from ..config import config
from ..errors import ServiceError
from ..models import SeTeukInput, SeTeukResult, parse_result
from .request_builder import build_request

logger = logging.getLogger(__name__)


def _to_sdk_parts(parts: list) -> list:
    """Map builder parts to what GenerativeModel.generate_content accepts."""
    sdk_parts = []
    for part in parts:
        if "inline_data" in part:
            blob = part["inline_data"]
            try:
                data = base64.b64decode(blob["data"])
            except (binascii.Error, ValueError) as e:
                raise ServiceError(f"Attachment is not valid base64: {e}") from e
            sdk_parts.append({"mime_type": blob["mime_type"], "data": data})
        else:
            sdk_parts.append(part["text"])
    return sdk_parts


def _log_usage(response, model: str):
    usage = getattr(response, 'usage_metadata', None)
    if not usage:
        return
    inp = getattr(usage, 'prompt_token_count', 0) or 0
    out = getattr(usage, 'candidates_token_count', 0) or 0
    logger.info("Gemini usage (%s): %d input / %d output tokens", model, inp, out)


def call_gemini(request: dict) -> str:
    """
    Send a request built by build_request and return the raw response text.

    Raises:
        ServiceError: missing API key, SDK/network failure, or empty reply.
    """
    api_key = config.gemini_api_key
    if not api_key:
        raise ServiceError("GEMINI_API_KEY not configured")

    model = request["model"]
    gen_settings = request["generation_config"]
    sdk_parts = _to_sdk_parts(request["contents"])

    try:
        genai.configure(api_key=api_key)
        gen_model = genai.GenerativeModel(
            model,
            system_instruction=request["system_instruction"],
        )
        generation_config = genai.GenerationConfig(
            response_mime_type=gen_settings["response_mime_type"],
            response_schema=copy.deepcopy(gen_settings["response_schema"]),
            temperature=gen_settings["temperature"],
        )
        logger.info("Calling Gemini (%s) with %d part(s)", model, len(sdk_parts))
        response = gen_model.generate_content(sdk_parts, generation_config=generation_config)
    except Exception as e:
        raise ServiceError(f"Gemini API error: {e}") from e

    _log_usage(response, model)

    try:
        text = response.text
    except ValueError as e:
        # Raised by the SDK when the candidate has no text parts (e.g. blocked)
        raise ServiceError(f"No response text generated: {e}") from e
    if not text:
        raise ServiceError("No response text generated.")
    return text


def generate_seteuk(submission: SeTeukInput) -> SeTeukResult:
    """Build the request for a submission, call Gemini once, and parse the result."""
    request = build_request(submission)
    response_text = call_gemini(request)
    return parse_result(response_text)
