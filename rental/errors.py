"""Exceptions raised by the rental models."""


class ValidationError(ValueError):
    """Raised when a vehicle is given an invalid value (e.g. a negative rate)."""

    def __init__(self, message: str = "Error: invalid value") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidStateError(RuntimeError):
    """Raised when a vehicle operation is not allowed in its current state."""

    def __init__(self, message: str = "Error: invalid vehicle state") -> None:
        self.message = message
        super().__init__(self.message)


class FleetFileError(ValidationError):
    """Raised when a fleet file does not match the fleet schema."""

    def __init__(self, filename, errors) -> None:
        self.filename = filename
        self.errors = list(errors)
        super().__init__(f"Invalid fleet file {filename}: " + "; ".join(self.errors))
