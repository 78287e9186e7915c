import pytest
from pydantic import ValidationError

from restbuilder import (
    Cookie,
    HeadersNotSetError,
    HttpMethod,
    InvalidHttpMethodError,
    RequestNotBuiltError,
    RestBuilderError,
)


class TestHttpMethod:
    def test_values(self):
        assert HttpMethod.values() == ["GET", "POST", "DELETE", "PUT", "PATCH"]

    def test_members_compare_as_strings(self):
        assert HttpMethod.POST == "POST"
        assert HttpMethod("DELETE") is HttpMethod.DELETE


class TestCookie:
    def test_str(self):
        assert str(Cookie(name="sid", value="abc")) == "sid=abc"

    def test_is_frozen(self):
        cookie = Cookie(name="sid", value="abc")
        with pytest.raises(ValidationError):
            cookie.value = "other"  # type: ignore[misc]

    def test_requires_name_and_value(self):
        with pytest.raises(ValidationError):
            Cookie(name="sid")  # type: ignore[call-arg]


class TestErrors:
    def test_invalid_method_message(self):
        error = InvalidHttpMethodError("foo", ["GET", "POST"])
        assert error.message == "Invalid method: foo\nValid methods: [GET, POST]"
        assert isinstance(error, RestBuilderError)
        assert isinstance(error, ValueError)

    def test_not_built_is_runtime_error(self):
        error = RequestNotBuiltError()
        assert isinstance(error, RestBuilderError)
        assert isinstance(error, RuntimeError)
        assert "build()" in str(error)

    def test_headers_not_set_is_lookup_error(self):
        error = HeadersNotSetError()
        assert isinstance(error, RestBuilderError)
        assert isinstance(error, LookupError)
