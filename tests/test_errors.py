"""Tests for routematch.errors — exception hierarchy."""

import pytest

import routematch
from routematch.errors import ConfigurationError, RouteMatchError


class TestHierarchy:
    def test_configuration_error_is_route_match_error(self) -> None:
        assert issubclass(ConfigurationError, RouteMatchError)

    def test_base_is_exception(self) -> None:
        assert issubclass(RouteMatchError, Exception)

    def test_message(self) -> None:
        err = ConfigurationError("bad route")
        assert str(err) == "bad route"


class TestPublicAPI:
    @pytest.mark.parametrize("name", routematch.__all__)
    def test_lazy_exports(self, name: str) -> None:
        assert getattr(routematch, name) is not None

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            routematch.nope  # noqa: B018

    def test_match_route_export(self) -> None:
        info = routematch.match_route("kakapo.com", "any", "https://api.kakapo.com/any")
        assert isinstance(info, routematch.URLInfo)
