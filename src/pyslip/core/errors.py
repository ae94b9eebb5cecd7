"""Error types raised by the render and build pipeline."""


class PySlipError(Exception):
    """Base class for all pyslip errors."""

    pass


class RenderError(PySlipError):
    """Raised when a markup node cannot be appended or configured.

    Aborts the whole render; no partial tree is returned.
    """

    pass


class StyleAggregationError(PySlipError):
    """Raised when the base stylesheet cannot be read or the output written."""

    def __init__(self, message: str, path: object = None):
        super().__init__(message)
        self.path = path


class ConfigError(PySlipError):
    """Raised on invalid site configuration or when an app cannot be found."""

    pass
