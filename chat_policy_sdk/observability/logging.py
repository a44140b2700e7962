"""
Structured logging utility for policy components.

This module provides a consistent logging interface for the resolver's
components, ensuring structured log lines with standard fields like
component, model and provider.
"""

import logging
import time
from contextlib import contextmanager
from typing import Optional


class PolicyLogger:
    """Structured logger for policy components."""

    def __init__(self, component: str):
        """
        Initialize logger for a specific component.

        Args:
            component: Name of the component (e.g., "registry", "planner")
        """
        self.component = component
        self.logger = logging.getLogger(f"chat_policy_sdk.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, model=model, **kwargs))

    def info(self, message: str, model: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(self._format_message(message, model=model, **kwargs))

    def warning(self, message: str, model: Optional[str] = None, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(self._format_message(message, model=model, **kwargs))

    def error(self, message: str, model: Optional[str] = None,
              error: Optional[Exception] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(self._format_message(message, model=model, **kwargs))

    @contextmanager
    def track(self, operation: str, model: Optional[str] = None, **fields):
        """
        Context manager to time an operation and log its outcome.

        Args:
            operation: The operation being performed (e.g., "plan_request")
            model: The model the operation concerns, if any
            **fields: Extra structured fields to include in every line

        Yields:
            Dict with operation metadata; callers may add result fields to it
        """
        start_time = time.perf_counter()
        self.debug(f"Starting {operation}", model=model, **fields)

        metadata = {'operation': operation, 'model': model}

        try:
            yield metadata

            duration = time.perf_counter() - start_time
            extra = {k: v for k, v in metadata.items() if k not in ('operation', 'model')}
            self.debug(
                f"Completed {operation}",
                model=model,
                duration_ms=round(duration * 1000, 3),
                **{**fields, **extra}
            )

        except Exception as e:
            duration = time.perf_counter() - start_time
            self.error(
                f"Failed {operation}",
                model=model,
                duration_ms=round(duration * 1000, 3),
                error=e,
                **fields
            )
            raise
