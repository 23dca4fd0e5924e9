"""Tests for wren.errors: exception hierarchy."""

import pytest

from wren.errors import ConfigurationError, MalformedURLError, WrenError


class TestHierarchy:
    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_malformed_url_is_value_error(self) -> None:
        assert issubclass(MalformedURLError, WrenError)
        assert issubclass(MalformedURLError, ValueError)

    def test_catch_as_base(self) -> None:
        with pytest.raises(WrenError):
            raise ConfigurationError("bad layout")


class TestMalformedURLError:
    def test_message_with_reason(self) -> None:
        err = MalformedURLError("http://[::1", "Invalid IPv6 URL")
        assert err.url == "http://[::1"
        assert str(err) == "Malformed URL 'http://[::1': Invalid IPv6 URL"

    def test_message_without_reason(self) -> None:
        assert str(MalformedURLError("x")) == "Malformed URL 'x'"
