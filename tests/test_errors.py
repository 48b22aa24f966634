"""Tests for kiln.errors — exception hierarchy and error messages."""

import pytest

from kiln.errors import (
    AssetError,
    AssetIOError,
    CompileError,
    ConfigurationError,
    HTTPError,
    KilnError,
    MethodNotAllowed,
    NotFound,
)


class TestHierarchy:
    def test_http_error_is_kiln_error(self) -> None:
        assert issubclass(HTTPError, KilnError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_configuration_error_is_kiln_error(self) -> None:
        assert issubclass(ConfigurationError, KilnError)

    def test_asset_errors(self) -> None:
        assert issubclass(AssetIOError, AssetError)
        assert issubclass(CompileError, AssetError)
        assert issubclass(AssetError, KilnError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request body")) == "400: Bad request body"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]

    def test_not_found_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_method_not_allowed_allow_header(self) -> None:
        err = MethodNotAllowed(frozenset({"POST", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, POST"),)


class TestAssetErrors:
    def test_compile_error_keeps_diagnostic(self) -> None:
        err = CompileError("sass", "Invalid CSS after 'a'")
        assert err.plugin == "sass"
        assert err.diagnostic == "Invalid CSS after 'a'"
        assert str(err) == "sass: Invalid CSS after 'a'"

    def test_io_error_message(self) -> None:
        err = AssetIOError("/srv/app.js", "cannot write artifact: disk full")
        assert err.path == "/srv/app.js"
        assert str(err) == "/srv/app.js: cannot write artifact: disk full"
