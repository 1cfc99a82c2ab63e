"""Sample dependency types shared by the test suite."""


class Service:
    """Sample dependency used as a candidate value."""

    def __init__(self, name: str = "service") -> None:
        self.name = name


class Request:
    """Sample per-call context value."""

    def __init__(self, path: str) -> None:
        self.path = path


class Controller:
    """Sample receiver whose methods are injected."""

    def handle(self, service: Service, greeting: str) -> str:
        return f"{greeting} from {service.name}"
