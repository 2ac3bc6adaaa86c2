"""Tests for picking the per-browser storage namespace."""
import pytest

from auth.browser_session import is_valid_browser_id, resolve_browser_id


def _fixed():
    return "newbrowser0001"


class TestResolveBrowserId:

    def test_own_cookie_wins(self):
        cookies = {"pms_browser_id": "cookie-browser-1", "_streamlit_xsrf": "2|ab|cd|123"}
        assert resolve_browser_id(cookies, {"bid": "query-browser-1"}, _fixed) == ("cookie-browser-1", "cookie")

    def test_streamlit_cookie_is_hashed(self):
        browser_id, source = resolve_browser_id({"_streamlit_xsrf": "2|ab|cd|123"}, {}, _fixed)
        assert source == "cookie"
        assert len(browser_id) == 32
        assert "|" not in browser_id
        assert resolve_browser_id({"_streamlit_xsrf": "2|ab|cd|123"}, {}, _fixed)[0] == browser_id

    def test_different_browsers_get_different_ids(self):
        first = resolve_browser_id({"_streamlit_xsrf": "2|ab|cd|123"}, {}, _fixed)[0]
        second = resolve_browser_id({"_streamlit_xsrf": "2|ef|01|456"}, {}, _fixed)[0]
        assert first != second

    def test_query_param_when_there_is_no_cookie(self):
        assert resolve_browser_id({}, {"bid": "query-browser-1"}, _fixed) == ("query-browser-1", "query")

    def test_new_id_when_nothing_is_known(self):
        assert resolve_browser_id(None, None, _fixed) == ("newbrowser0001", "new")

    @pytest.mark.parametrize("bad", ["short", "has/slash-in-it", "x" * 65, "spaces are bad"])
    def test_malformed_values_are_ignored(self, bad):
        assert resolve_browser_id({"pms_browser_id": bad}, {"bid": bad}, _fixed) == ("newbrowser0001", "new")

    def test_default_generator_gives_valid_ids(self):
        browser_id, source = resolve_browser_id({}, {})
        assert source == "new"
        assert is_valid_browser_id(browser_id)
