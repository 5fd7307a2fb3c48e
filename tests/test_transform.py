"""Tests for the release body replacement."""

import pytest

from release_updater.transform import replace_body


class TestReplaceBody:
    def test_replaces_every_occurrence(self):
        body, changed = replace_body("a CHANGELOG, b CHANGELOG", "CHANGELOG", "NOTES")
        assert body == "a NOTES, b NOTES"
        assert changed is True

    def test_missing_value_is_unchanged(self):
        body, changed = replace_body("no match here", "CHANGELOG", "NOTES")
        assert body == "no match here"
        assert changed is False

    def test_match_is_case_sensitive(self):
        body, changed = replace_body("see changelog", "CHANGELOG", "NOTES")
        assert body == "see changelog"
        assert changed is False

    def test_value_is_not_a_regex(self):
        body, changed = replace_body("v1.2 and v1x2", "v1.2", "v2.0")
        assert body == "v2.0 and v1x2"
        assert changed is True

    def test_matches_do_not_overlap(self):
        body, _ = replace_body("aaaa", "aa", "b")
        assert body == "bb"

    def test_identical_replacement_reports_no_change(self):
        body, changed = replace_body("see CHANGELOG", "CHANGELOG", "CHANGELOG")
        assert body == "see CHANGELOG"
        assert changed is False

    def test_empty_replacement_deletes(self):
        body, changed = replace_body("keep [draft] this", "[draft] ", "")
        assert body == "keep this"
        assert changed is True

    def test_empty_value_never_matches(self):
        body, changed = replace_body("text", "", "x")
        assert body == "text"
        assert changed is False

    def test_empty_body(self):
        assert replace_body("", "CHANGELOG", "NOTES") == ("", False)

    @pytest.mark.parametrize("body", [
        "see CHANGELOG",
        "CHANGELOG\n\nCHANGELOG links",
        "nothing to see",
    ])
    def test_second_pass_is_idempotent(self, body):
        once, _ = replace_body(body, "CHANGELOG", "NOTES")
        twice, changed = replace_body(once, "CHANGELOG", "NOTES")
        assert twice == once
        assert changed is False
