import pytest

from infoxml.core.model import FetchError, ParseError, Result
from infoxml.core.util import normalize_key, unquote, next_index, result_asdict


class TestNormalizeKey:
    """Canonical integer strings become ints."""

    @pytest.mark.parametrize("key,expected", [
        ("0", 0),
        ("7", 7),
        ("42", 42),
        ("-3", -3),
    ])
    def test_integers(self, key, expected):
        assert normalize_key(key) == expected
        assert isinstance(normalize_key(key), int)

    @pytest.mark.parametrize("key", ["007", "+1", "-0", "1.5", " 1", "1 ", "x1", ""])
    def test_non_canonical_stay_strings(self, key):
        assert normalize_key(key) == key


class TestUnquote:
    """Quote stripping and unescaping."""

    def test_double(self):
        assert unquote(r'"a \"b\" c"') == 'a "b" c'

    def test_single(self):
        assert unquote(r"'it\'s'") == "it's"

    def test_keeps_other_escapes(self):
        assert unquote(r'"a\'b\\c"') == r"a\'b\\c"

    def test_empty(self):
        assert unquote('""') == ""


class TestNextIndex:
    def test_counts_entries(self):
        assert next_index({}) == 0
        assert next_index({5: "a"}) == 1
        assert next_index({"x": 1, "y": 2}) == 2


class TestErrors:
    """Error types."""

    def test_parse_error_is_runtime_error(self):
        assert issubclass(ParseError, RuntimeError)

    def test_fetch_error_is_io_error(self):
        err = FetchError("GET request failed with status 503", status_code=503)
        assert isinstance(err, IOError)
        assert err.status_code == 503
        assert str(err) == "GET request failed with status 503"

    def test_fetch_error_without_status(self):
        assert FetchError("boom").status_code is None


class TestResultAsdict:
    def test_success(self):
        res = Result(success=True, source="a.info", data={"name": "A"}, error=None)
        assert result_asdict(res) == {"success": True, "source": "a.info", "data": {"name": "A"}}

    def test_failure(self):
        res = Result(success=False, source="b.info", data=None, error="No such file")
        assert result_asdict(res) == {"success": False, "source": "b.info", "error": "No such file"}
