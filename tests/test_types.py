import pytest

from reqtools.types import Header, Url


def test_url_to_and_from_string():
    s = "https://example.com/some/path"
    url = Url(s)
    assert url == s
    assert str(url) == s


def test_url_concatenation_keeps_type():
    url = Url("http://127.0.0.1:8080") + "/hello.html"
    assert isinstance(url, Url)
    assert url == "http://127.0.0.1:8080/hello.html"


def test_url_concatenation_with_non_string_fails():
    with pytest.raises(TypeError):
        Url("http://example.com") + 5


def test_header_lookup_is_case_insensitive():
    header = Header({"Content-Type": "text/html"})
    assert header["content-type"] == "text/html"
    assert header["CONTENT-TYPE"] == "text/html"
    assert "content-TYPE" in header


def test_header_missing_key_raises():
    header = Header()
    with pytest.raises(KeyError):
        header["hello"]
    assert header.get("hello", "") == ""


def test_header_overwrite_keeps_first_spelling():
    header = Header()
    header["Content-Type"] = "text/html"
    header["content-type"] = "application/json"
    assert len(header) == 1
    assert list(header.items()) == [("Content-Type", "application/json")]


def test_header_iteration_ordered_case_insensitively():
    header = Header([("b", "2"), ("A", "1"), ("c", "3")])
    assert list(header) == ["A", "b", "c"]


def test_header_delete():
    header = Header({"Server": "nginx", "Date": "today"})
    del header["SERVER"]
    assert list(header) == ["Date"]
    with pytest.raises(KeyError):
        del header["server"]


def test_header_repr():
    header = Header({"hello": "world"})
    assert repr(header) == "Header({'hello': 'world'})"