from __future__ import annotations


class EdenredError(Exception):
    """Base class for everything that can abort a balance run."""


class ConfigError(EdenredError):
    pass


class NetworkError(EdenredError):
    pass


class APIError(EdenredError):
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Edenred API error: {status_code}")


class DecodeError(EdenredError):
    pass
