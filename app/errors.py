## Roadmap generation errors
# Every kind is reported to the caller as HTTP 500 {"error": message};
# the subclass only matters for logs.


class RoadmapError(Exception):
    """Base class for failures while generating a roadmap."""


class ConfigurationError(RoadmapError):
    pass


class InvalidRequest(RoadmapError):
    pass


class UpstreamError(RoadmapError):
    """The chat-completion API answered with a failure or could not be reached."""

    def __init__(self, message: str = "Failed to generate roadmap", *,
    status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidResponseFormat(RoadmapError):
    def __init__(self, message: str = "Invalid response format"):
        super().__init__(message)
