#!/usr/bin/env python3
"""
Basic Usage Example - funcinject

This script demonstrates how to:
- Build an injector once for a handler function
- Mix plain values, function binders and a hijacker
- Call the handler repeatedly with per-call context
- Inject a method whose receiver is supplied by the caller

Run: python examples/basic_usage.py
"""

from dataclasses import asdict
from typing import Any, Optional

from funcinject import BindObject, make_bind_object, make_func_injector
from funcinject.config import ConfigLoader
from funcinject.logging import configure_logging


class Database:
    def __init__(self, dsn: str) -> None:
        self.dsn = dsn


class Request:
    def __init__(self, path: str, user: str) -> None:
        self.path = path
        self.user = user


class Clock:
    def now(self) -> str:
        return "2024-01-01T00:00:00Z"


def current_user(request: Request) -> str:
    """Function binder: resolved again on every call."""
    return request.user


def handle(db: Database, user: str, clock: Clock) -> str:
    return f"{user} queried {db.dsn} at {clock.now()}"


class UsersController:
    def show(self, db: Database, user: str) -> str:
        return f"{type(self).__name__}: {user} via {db.dsn}"


def hijack_clock(typ: Any) -> Optional[BindObject]:
    """Supply the clock without putting it in the pool."""
    if typ is Clock:
        return make_bind_object(Clock())
    return None


def main() -> None:
    loader = ConfigLoader.create()
    configure_logging(**asdict(loader.load_logging_params({"logging": {"level": "DEBUG"}})))

    db = Database("postgres://localhost/app")

    injector = make_func_injector(
        handle, db, current_user, hijack=hijack_clock, params=loader.load_injector_params()
    )
    print("Bindings:")
    print(injector.trace)

    for request in (Request("/a", "alice"), Request("/b", "bob")):
        print(injector.call(request))

    # Unbound method: position 0 is the receiver and is filled by the caller.
    method_injector = make_func_injector(UsersController.show, db, current_user)
    args: list[Any] = [UsersController(), None, None]
    method_injector.inject(args, Request("/users", "carol"))
    print(UsersController.show(*args))


if __name__ == "__main__":
    main()
