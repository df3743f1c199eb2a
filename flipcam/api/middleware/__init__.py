"""API middleware."""

from flipcam.api.middleware.error_handler import ErrorHandlerMiddleware
from flipcam.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
