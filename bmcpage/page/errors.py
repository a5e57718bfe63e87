"""Page-layer exceptions."""


class PageError(RuntimeError):
    """Base error raised by the page helpers."""


class TransportError(PageError):
    """Raised when a request times out, cannot connect, or gets a non-2xx status."""


class ParseError(PageError):
    """Raised when a response body is not valid JSON."""


class ShapeError(PageError):
    """Raised when a decoded response does not have the expected envelope shape."""


__all__ = [
    "PageError",
    "TransportError",
    "ParseError",
    "ShapeError",
]
