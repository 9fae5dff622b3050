"""Custom exceptions for envase-lens."""


class EnvaseLensError(Exception):
    """Base exception for envase-lens."""

    pass


class AuthenticationError(EnvaseLensError):
    """Raised when API key is invalid or missing."""

    pass


class RateLimitError(EnvaseLensError):
    """Raised when API rate limit is exceeded."""

    pass


class ImageError(EnvaseLensError):
    """Raised when image cannot be read or is invalid."""

    pass


class VisionModelError(EnvaseLensError):
    """Raised when the vision model call itself fails."""

    pass


class VisionResponseError(EnvaseLensError):
    """Base for unusable material-identification responses."""

    pass


class EmptyResponseError(VisionResponseError):
    """Raised when the vision model returns no content."""

    pass


class InvalidJSONError(VisionResponseError):
    """Raised when the vision model returns text that is not JSON."""

    pass


class SchemaValidationError(VisionResponseError):
    """Raised when the vision model JSON does not match the analysis schema."""

    pass


class VisionTimeoutError(EnvaseLensError):
    """Raised when the analysis exceeds its time budget."""

    pass


class BlockingClaimsError(EnvaseLensError):
    """Raised when text contains prohibited environmental claims."""

    def __init__(self, message: str, violations: list):
        super().__init__(message)
        self.violations = violations


class WorkflowError(EnvaseLensError):
    """Raised on an invalid transition of an interactive workflow."""

    pass
