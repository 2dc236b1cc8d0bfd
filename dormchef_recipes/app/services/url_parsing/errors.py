"""Classified failures raised by the URL recipe import pipeline."""

from typing import Optional


class RecipeImportError(Exception):
    """Base class for every failure of a single import call."""

    error_code = "import_failed"
    message = "Unable to import recipe"
    http_status = 500

    def __init__(self, details: Optional[str] = None):
        self.details = details
        super().__init__(details or self.message)


class InvalidUrlFormat(RecipeImportError):
    error_code = "invalid_url"
    message = "Invalid URL format"
    http_status = 422


class NetworkError(RecipeImportError):
    error_code = "network_error"
    message = "Failed to fetch the URL"
    http_status = 502


class FetchTimeout(RecipeImportError):
    error_code = "fetch_timeout"
    message = "The site took too long to respond"
    http_status = 504


class FetchFailed(RecipeImportError):
    """The target answered with a non-2xx status."""

    error_code = "fetch_failed"
    message = "Failed to fetch the URL"
    http_status = 502

    def __init__(self, status: int, status_text: str = ""):
        self.status = status
        self.status_text = status_text
        super().__init__(f"Site returned status {status} {status_text}".strip())


class ExtractionFailed(RecipeImportError):
    error_code = "extraction_failed"
    message = "Could not find a recipe on this page"
    http_status = 422
