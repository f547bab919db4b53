"""
Test: Form submission parsing and structured response parsing.
"""
import json
import pytest

from seteuk.errors import ValidationError, SchemaError
from seteuk.models import parse_submission, parse_result, add_keyword, SeTeukInput
from seteuk.prompt_config import EMPTY_SUBMISSION_MESSAGE
from tests.conftest import SAMPLE_RESULT, b64


class TestParseSubmission:
    def test_empty_submission_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_submission({"activityData": "", "teacherComments": "", "files": []})
        assert str(exc.value) == EMPTY_SUBMISSION_MESSAGE

    def test_whitespace_only_rejected(self):
        with pytest.raises(ValidationError):
            parse_submission({"activityData": "   \n", "teacherComments": "\t"})

    def test_teacher_comment_alone_is_enough(self):
        submission = parse_submission({"teacherComments": "성실함"})
        assert submission.teacher_comments == "성실함"

    def test_file_alone_is_enough(self):
        submission = parse_submission({
            "files": [{"data": b64("메모"), "mimeType": "text/plain", "name": "memo.txt"}],
        })
        assert submission.files[0].name == "memo.txt"
        assert submission.files[0].mime_type == "text/plain"

    def test_camel_case_aliases(self):
        submission = parse_submission({
            "activityData": "발표함",
            "lengthOption": "짧게 (1000바이트/300자 내외)",
            "emphasisKeywords": ["리더십"],
        })
        assert submission.activity_data == "발표함"
        assert submission.length_option == "짧게 (1000바이트/300자 내외)"
        assert submission.emphasis_keywords == ["리더십"]

    def test_default_length_option(self):
        submission = parse_submission({"activityData": "발표함"})
        assert submission.length_option == "표준 (1500바이트/500자 내외)"

    def test_unknown_length_option_rejected(self):
        with pytest.raises(ValidationError):
            parse_submission({"activityData": "발표함", "lengthOption": "아주 길게"})

    def test_non_dict_body_rejected(self):
        with pytest.raises(ValidationError):
            parse_submission(None)

    def test_file_missing_data_rejected(self):
        with pytest.raises(ValidationError):
            parse_submission({"files": [{"name": "a.png", "mimeType": "image/png"}]})


class TestEmphasisKeywords:
    def test_insertion_order_without_duplicates(self):
        submission = SeTeukInput(
            activity_data="x",
            emphasis_keywords=["탐구력", "리더십", "탐구력", " 리더십 ", "", "협업"],
        )
        assert submission.emphasis_keywords == ["탐구력", "리더십", "협업"]

    def test_add_keyword_ignores_blank(self):
        assert add_keyword(["a"], "  ") == ["a"]

    def test_add_keyword_does_not_mutate(self):
        keywords = ["a"]
        assert add_keyword(keywords, "b") == ["a", "b"]
        assert keywords == ["a"]


class TestParseResult:
    def test_well_formed(self):
        result = parse_result(json.dumps(SAMPLE_RESULT, ensure_ascii=False))
        assert result.analysis.keywords == ["탐구력", "의사소통", "공동체 의식"]
        assert result.draft.startswith("기후 변화")

    def test_exposes_exactly_the_schema_fields(self):
        payload = dict(SAMPLE_RESULT, extra="ignored")
        dumped = parse_result(json.dumps(payload)).model_dump()
        assert set(dumped) == {"analysis", "draft"}
        assert set(dumped["analysis"]) == {"keywords", "strengths", "storyline"}

    def test_missing_draft(self):
        with pytest.raises(SchemaError):
            parse_result(json.dumps({"analysis": SAMPLE_RESULT["analysis"]}))

    def test_missing_storyline(self):
        analysis = {k: v for k, v in SAMPLE_RESULT["analysis"].items() if k != "storyline"}
        with pytest.raises(SchemaError):
            parse_result(json.dumps({"analysis": analysis, "draft": "초안"}))

    def test_keywords_wrong_type(self):
        analysis = dict(SAMPLE_RESULT["analysis"], keywords="탐구력")
        with pytest.raises(SchemaError):
            parse_result(json.dumps({"analysis": analysis, "draft": "초안"}))

    def test_not_json(self):
        with pytest.raises(SchemaError):
            parse_result("죄송합니다, 작성할 수 없습니다.")

    def test_keyword_count_not_enforced(self):
        analysis = dict(SAMPLE_RESULT["analysis"], keywords=["하나"])
        result = parse_result(json.dumps({"analysis": analysis, "draft": "초안"}))
        assert result.analysis.keywords == ["하나"]
