"""Shared (non-domain) exceptions."""


class ExternalServiceError(Exception):
    """External service call failed."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"[{service}] {message}")


class LlmResponseError(ExternalServiceError):
    """The model answered, but not with usable suggestion JSON."""

    def __init__(self, message: str):
        super().__init__("llm", message)
