"""
Data models for SeTeuk Master.

Pydantic models are used both for the browser form payload (camelCase
aliases accepted) and for the structured JSON the model returns.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .config import LENGTH_OPTIONS, DEFAULT_LENGTH_OPTION
from .errors import ValidationError, SchemaError
from .prompt_config import EMPTY_SUBMISSION_MESSAGE


# =============================================================================
# INPUT
# =============================================================================

class UploadedFile(BaseModel):
    """A file selected in the form, already read and base64-encoded."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data: str
    mime_type: str = Field(default="", alias="mimeType")
    name: str


def add_keyword(keywords: List[str], keyword: str) -> List[str]:
    """Return keywords with one more entry, keeping insertion order and no duplicates."""
    keyword = (keyword or "").strip()
    if not keyword or keyword in keywords:
        return list(keywords)
    return list(keywords) + [keyword]


class SeTeukInput(BaseModel):
    """One submission of the form. Built fresh per request."""
    model_config = ConfigDict(populate_by_name=True)

    activity_data: str = Field(default="", alias="activityData")
    teacher_comments: str = Field(default="", alias="teacherComments")
    length_option: str = Field(default=DEFAULT_LENGTH_OPTION, alias="lengthOption")
    emphasis_keywords: List[str] = Field(default_factory=list, alias="emphasisKeywords")
    files: List[UploadedFile] = Field(default_factory=list)

    @field_validator("length_option")
    @classmethod
    def _known_length_option(cls, value: str) -> str:
        if value not in LENGTH_OPTIONS:
            raise ValueError(f"unknown length option: {value}")
        return value

    @field_validator("emphasis_keywords")
    @classmethod
    def _ordered_unique_keywords(cls, value: List[str]) -> List[str]:
        keywords: List[str] = []
        for keyword in value:
            keywords = add_keyword(keywords, keyword)
        return keywords

    def has_content(self) -> bool:
        """True when at least one of text, teacher comment or file is present."""
        return bool(
            self.activity_data.strip()
            or self.teacher_comments.strip()
            or self.files
        )


def parse_submission(data) -> SeTeukInput:
    """
    Build a SeTeukInput from the JSON body of a form submission.

    Raises ValidationError for malformed payloads and for empty submissions,
    so the caller can reject them before touching the network.
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    try:
        submission = SeTeukInput.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid submission: {e.errors()[0].get('msg', 'invalid field')}") from e

    if not submission.has_content():
        raise ValidationError(EMPTY_SUBMISSION_MESSAGE)
    return submission


# =============================================================================
# OUTPUT (structured response from Gemini)
# =============================================================================

class SeTeukAnalysis(BaseModel):
    keywords: List[str]
    strengths: str
    storyline: str


class SeTeukResult(BaseModel):
    analysis: SeTeukAnalysis
    draft: str


def parse_result(response_text: str) -> SeTeukResult:
    """Parse the model's JSON text into a SeTeukResult, or raise SchemaError."""
    try:
        return SeTeukResult.model_validate_json(response_text)
    except PydanticValidationError as e:
        raise SchemaError(f"Response does not match the SeTeuk schema: {e.error_count()} error(s)") from e
