"""Fatal error types.

Traversal problems never surface here; the scanner absorbs them.
"""

from typing import Optional


class ScanDiskError(Exception):
    """Base class for errors that end the run."""

    def __init__(self, message: str, code: str = "SCANDISK_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigError(ScanDiskError):
    """Bad root path or option, raised before any traversal."""

    def __init__(self, message: str):
        super().__init__(message, "CONFIG_ERROR")


class RenderError(ScanDiskError):
    """Template, output file or static asset failure in HTML mode."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, "RENDER_ERROR")
        self.cause = cause
