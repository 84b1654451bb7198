"""Error handling for formatter configuration."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for all configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible config error context
        """Initialize ConfigError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible config error context


class ConfigLoadError(ConfigError):
    """Exception raised when a configuration file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigLoadError.

        Args:
            message: Error message
            file_path: Path to the configuration file that failed to load
            context: Additional context information
        """
        full_context = context or {}
        if file_path is not None:
            full_context["file_path"] = file_path

        super().__init__(message, full_context)
        self.file_path: str | None = file_path


class ConfigValidationError(ConfigError):
    """Exception raised when an option value is outside its allowed set."""

    def __init__(
        self,
        message: str,
        pydantic_error: ValidationError | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigValidationError.

        Args:
            message: Error message
            pydantic_error: Original Pydantic ValidationError
            context: Additional context information
        """
        full_context = context or {}
        if pydantic_error is not None:
            full_context["validation_errors"] = format_validation_errors(pydantic_error)

        super().__init__(message, full_context)
        self.pydantic_error: ValidationError | None = pydantic_error


def format_validation_errors(error: ValidationError) -> list[dict[str, Any]]:  # pyright: ignore[reportAny] # Flexible error formatting
    """Format Pydantic validation errors for better readability.

    Args:
        error: Pydantic ValidationError

    Returns:
        List of formatted error dictionaries
    """
    formatted_errors: list[dict[str, Any]] = []  # pyright: ignore[reportAny] # Flexible error formatting
    for err in error.errors():
        formatted_errors.append({
            "field": ".".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
            "input": err.get("input"),
        })
    return formatted_errors


def describe_validation_error(error: ValidationError) -> str:
    """Build a one-line message naming each offending option and its value.

    Example:
        >>> describe_validation_error(err)
        "Invalid option 'round'='hours': Input should be 'none', 'seconds' or 'ms'"
    """
    problems = [
        f"'{item['field']}'={item['input']!r}: {item['message']}"
        for item in format_validation_errors(error)
    ]
    return "Invalid option " + "; ".join(problems)


def handle_config_error(error: Exception, operation: str) -> ConfigError:
    """Wrap configuration errors with consistent error types.

    Args:
        error: Original exception
        operation: Description of the operation that failed

    Returns:
        Wrapped ConfigError instance
    """
    logger.debug(f"Configuration error during {operation}: {error}", exc_info=True)

    # Return known configuration errors as-is
    if isinstance(error, ConfigError):
        return error

    if isinstance(error, ValidationError):
        wrapped: ConfigError = ConfigValidationError(
            f"{describe_validation_error(error)} (during {operation})",
            pydantic_error=error,
        )
    else:
        wrapped = ConfigError(
            f"Configuration error during {operation}: {error}",
            context={"operation": operation, "original_error_type": type(error).__name__},
        )
    wrapped.__cause__ = error
    return wrapped


def log_config_error(error: ConfigError, level: int = logging.WARNING) -> None:
    """Log configuration error with its context and a suggested fix.

    Args:
        error: Configuration error to log
        level: Logging level (default: WARNING)
    """
    message = str(error)
    if error.context:
        context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())  # pyright: ignore[reportAny] # Flexible context values
        message = f"{message} (context: {context_str})"

    suggestion = suggest_config_fix(error)
    if suggestion is not None:
        message = f"{message}. {suggestion}"

    logger.log(level, message)


def suggest_config_fix(error: ConfigError) -> str | None:
    """Suggest potential fixes for configuration errors.

    Args:
        error: Configuration error

    Returns:
        Suggested fix or None if no suggestion available
    """
    if isinstance(error, ConfigLoadError):
        if error.file_path:
            return f"Check that the file exists and is readable: {error.file_path}"
        return "Check that the configuration file exists and is readable"

    if isinstance(error, ConfigValidationError) and error.pydantic_error:
        errors = error.pydantic_error.errors()
        if len(errors) == 1:
            field_path = ".".join(str(loc) for loc in errors[0]["loc"])
            return f"Fix validation error in option '{field_path}': {errors[0]['msg']}"
        return f"Fix {len(errors)} invalid options"

    return None
