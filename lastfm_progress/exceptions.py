"""
Failures that abort a progress report run
"""


class ProgressReportError(Exception):
    """Base class for failures that abort a progress report run"""


class FetchError(ProgressReportError):
    """Raised when the documentation page returns a non-success status"""
    def __init__(self, url: str, status_code: int, reason: str):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Server returned {status_code} fetching {url}: {reason}")


class ParseError(ProgressReportError):
    """Raised when the page doesn't have the expected method panel structure"""
    def __init__(self, message: str, fragment: str = ""):
        self.message = message
        self.fragment = fragment
        super().__init__(f"{message}\n{fragment}" if fragment else message)


class EmptyCatalogError(ProgressReportError):
    """Raised when there are no documented methods to compute progress against"""
    def __init__(self):
        super().__init__("The API method catalog is empty, can't compute a completion percentage")


class ImplementedSourceError(ProgressReportError):
    """Raised when the SDK package listing the implemented methods can't be imported"""
    def __init__(self, package_name: str, cause: Exception):
        self.package_name = package_name
        self.cause = cause
        super().__init__(f"Couldn't import {package_name}: {type(cause).__name__}: {cause}")
