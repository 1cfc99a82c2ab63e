"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, List

from funcinject.binding.bind_object import BindObject, make_bind_object

from .samples import Request, Service


@pytest.fixture
def service() -> Service:
    """Sample service instance."""
    return Service("users")


@pytest.fixture
def request_path_binder():
    """Function binder producing a str from the per-call request."""
    def binder(request: Request) -> str:
        return request.path

    return binder


@pytest.fixture
def recording_hijacker():
    """Hijacker that supplies a fixed bind object for every declared type."""
    calls: List[Any] = []

    def hijack(typ: Any) -> BindObject:
        calls.append(typ)
        return make_bind_object(f"override:{getattr(typ, '__name__', typ)}")

    hijack.calls = calls
    return hijack
