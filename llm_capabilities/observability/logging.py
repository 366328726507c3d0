"""
Structured logging utility for capability resolution components.

This module provides a consistent logging interface for the cache, the remote
index, the registry adapter and the detector, so every message carries the
component name plus model/capability fields where they apply.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional


class CapabilityLogger:
    """Structured logger for one resolution component."""

    def __init__(self, component: str):
        """
        Initialize logger for a specific component.

        Args:
            component: Name of the component (e.g., "cache", "index")
        """
        self.component = component
        self.logger = logging.getLogger(f"llm_capabilities.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, model: Optional[str] = None,
              capability: Optional[Any] = None, **kwargs):
        self.logger.debug(
            self._format_message(message, model=model, capability=capability, **kwargs)
        )

    def info(self, message: str, model: Optional[str] = None,
             capability: Optional[Any] = None, **kwargs):
        self.logger.info(
            self._format_message(message, model=model, capability=capability, **kwargs)
        )

    def warning(self, message: str, model: Optional[str] = None,
                capability: Optional[Any] = None, **kwargs):
        self.logger.warning(
            self._format_message(message, model=model, capability=capability, **kwargs)
        )

    def error(self, message: str, model: Optional[str] = None,
              capability: Optional[Any] = None, error: Optional[Exception] = None, **kwargs):
        """Log error message, adding the exception type and text when given."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(
            self._format_message(message, model=model, capability=capability, **kwargs)
        )

    @contextmanager
    def track(self, operation: str, recoverable: bool = False, **fields: Any):
        """
        Context manager that times an operation and logs its outcome.

        Args:
            operation: Name of the operation (e.g., "fetch", "load")
            recoverable: Log failures at warning instead of error
            **fields: Extra structured fields for every message

        Yields:
            Dict that the caller may fill with result fields to log on completion
        """
        start_time = time.time()
        self.debug(f"Starting {operation}", **fields)

        result: Dict[str, Any] = {}
        try:
            yield result
        except Exception as e:
            duration = time.time() - start_time
            if recoverable:
                self.warning(
                    f"Failed {operation}",
                    duration_ms=int(duration * 1000),
                    error_type=type(e).__name__,
                    error_msg=str(e),
                    **fields
                )
            else:
                self.error(
                    f"Failed {operation}",
                    duration_ms=int(duration * 1000),
                    error=e,
                    **fields
                )
            raise

        duration = time.time() - start_time
        self.info(
            f"Completed {operation}",
            duration_ms=int(duration * 1000),
            **fields,
            **result
        )
