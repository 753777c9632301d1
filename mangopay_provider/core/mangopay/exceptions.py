"""Mangopay-specific exceptions for error handling."""


class MangopayError(Exception):
    """Base exception for all Mangopay operations."""
    pass


class MangopayAPIError(MangopayError):
    """Non-200 response from the Mangopay API.
    
    Attributes:
        status_code: HTTP status code
        message: Raw response body
        endpoint: API endpoint that failed
    """
    
    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"status: {status_code}, body: {message}")


class MangopayConfigError(MangopayError):
    """Client cannot be built or used with the given configuration."""
    pass
