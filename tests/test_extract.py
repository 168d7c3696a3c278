import pytest

from jobscan.errors import FormatError
from jobscan.extract import (
    Shape,
    coerce_listings,
    coerce_report,
    extract_payload,
    parse_payload,
)


class TestExtractPayload:
    def test_fenced_json_block_with_prose(self):
        raw = 'Sure! Here are the jobs:\n```json\n  [{"id": 1}]  \n```\nGood luck!'
        assert extract_payload(raw) == '[{"id": 1}]'

    def test_untagged_fence(self):
        assert extract_payload('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_uppercase_tag(self):
        assert extract_payload('```JSON\n[1]\n```') == "[1]"

    def test_first_fence_wins(self):
        raw = "```json\n[1]\n```\nand also\n```json\n[2]\n```"
        assert extract_payload(raw) == "[1]"

    def test_fence_preferred_over_earlier_bracket(self):
        raw = 'See [note] below\n```json\n{"a": [1]}\n```'
        assert extract_payload(raw) == '{"a": [1]}'

    def test_bare_array_in_prose(self):
        assert extract_payload("Sure, here are some jobs: [1,2,3] enjoy!") == "[1,2,3]"

    def test_bracket_span_runs_to_last_close(self):
        raw = 'Result: [{"tags": ["a", "b"]}] done'
        assert extract_payload(raw) == '[{"tags": ["a", "b"]}]'

    def test_no_fence_no_array_returns_trimmed_text(self):
        assert extract_payload('  {"analysis": "ok"}  \n') == '{"analysis": "ok"}'

    def test_close_before_open_is_not_an_array(self):
        assert extract_payload(" ] nothing [ ") == "] nothing ["

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_input(self, raw):
        assert extract_payload(raw) == ""


class TestParsePayload:
    def test_valid_array(self):
        assert parse_payload('[{"id": 1}]', Shape.LISTINGS) == [{"id": 1}]

    def test_trailing_comma_is_format_error(self):
        with pytest.raises(FormatError) as info:
            parse_payload('[{"id": 1},]', Shape.LISTINGS)
        assert info.value.payload == '[{"id": 1},]'

    def test_prose_is_format_error(self):
        with pytest.raises(FormatError):
            parse_payload("I could not find any jobs.", Shape.LISTINGS)

    def test_non_array_listings_treated_as_empty(self):
        assert parse_payload('{"jobs": []}', Shape.LISTINGS) == []

    def test_report_object(self):
        assert parse_payload('{"analysis": "x"}', Shape.REPORT) == {"analysis": "x"}

    def test_report_array_is_format_error(self):
        with pytest.raises(FormatError):
            parse_payload("[1, 2]", Shape.REPORT)


class TestCoerceListings:
    def test_ids_are_strings(self):
        jobs = coerce_listings([{"id": 1, "title": "X", "url": "https://e.co/1"}])
        assert jobs[0].id == "1"
        assert jobs[0].actionable

    def test_scalar_elements_rejected(self):
        with pytest.raises(FormatError):
            coerce_listings([1, 2, 3], payload="[1,2,3]")

    def test_missing_and_duplicate_ids_synthesized(self):
        jobs = coerce_listings([{"id": 7}, {"id": 7}, {}, {"id": "job-1"}])
        ids = [j.id for j in jobs]
        assert ids[0] == "7"
        assert ids[1] == "job-1"
        assert ids[2] == "job-2"
        assert len(set(ids)) == 4

    def test_missing_url_kept_but_not_actionable(self):
        jobs = coerce_listings([
            {"id": 1, "title": "A", "url": "https://e.co/a"},
            {"id": 2, "title": "B"},
        ])
        assert len(jobs) == 2
        assert jobs[1].url is None
        assert not jobs[1].actionable

    def test_relative_url_not_actionable(self):
        jobs = coerce_listings([{"id": 1, "url": "/jobs/1", "companyUrl": "#"}])
        assert not jobs[0].actionable
        assert not jobs[0].company_actionable

    def test_optional_defaults(self):
        job = coerce_listings([{"id": 1, "salary": "", "posted": None}])[0]
        assert job.salary == "Not specified"
        assert job.posted == "N/A"


class TestCoerceReport:
    def test_keywords_from_list_and_string(self):
        report = coerce_report({
            "analysis": "fine",
            "keywordsToAdd": ["a", "a", " b "],
            "keywordsToRemove": "x, y",
        })
        assert report.analysis == "fine"
        assert report.suggestions == ""
        assert report.keywords_to_add == ["a", "b"]
        assert report.keywords_to_remove == ["x", "y"]
