"""Tests for the custom template filters."""
import pytest

from quire.site.filters import author_names, mailto


class TestAuthorNames:

    @pytest.mark.parametrize(
        "names, expected",
        [
            ([], ""),
            (["Ada"], "Ada"),
            (["Ada", "Grace"], "Ada and Grace"),
            (["A", "B", "C"], "A, B and C"),
        ],
    )
    def test_join(self, names, expected):
        assert author_names([{"Name": n} for n in names]) == expected

    def test_blank_names_skipped(self):
        assert author_names([{"Name": ""}, {"Name": "Ada"}]) == "Ada"

    def test_conjunction(self):
        assert author_names([{"Name": "A"}, {"Name": "B"}], "&") == "A & B"


class TestMailto:

    def test_with_mail(self):
        assert mailto({"Name": "Ada", "Mail": "ada@example.org"}) == (
            '<a href="mailto:ada@example.org">Ada</a>'
        )

    def test_without_mail(self):
        assert mailto({"Name": "Ada", "Mail": ""}) == "Ada"

    def test_escapes(self):
        assert mailto({"Name": "<Ada>", "Mail": ""}) == "&lt;Ada&gt;"
