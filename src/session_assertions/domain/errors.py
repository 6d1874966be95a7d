class AssertionFailure(AssertionError):
    """Raised when a session assertion does not hold."""


class ServiceNotFoundError(LookupError):
    """Raised when a named collaborator is missing from a service mapping."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Service '{name}' is not registered")
        self.name = name
