"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidTimeFormat(DomainError):
    """Raised when a wall-clock value is not HH:MM (24-hour)."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid time format: {value!r} (expected HH:MM)")


class InvalidMood(DomainError):
    """Raised when a mood tag is outside the supported vocabulary."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown mood: {value!r}")
