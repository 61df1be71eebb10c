"""Error types and message formatting for gridedit."""

from __future__ import annotations

from typing import Any


class GridEditError(RuntimeError):
    pass


class ConfigError(GridEditError):
    pass


class DictionaryError(GridEditError):
    pass


def format_error_message(operation: str, error: Exception, context: dict[str, Any] | None = None) -> str:
    """Format a user-friendly error message based on the exception type and context."""
    error_str = str(error)
    context = context or {}
    cause = error.__cause__ or error

    # Missing dictionary file
    if isinstance(cause, FileNotFoundError):
        path = context.get("path", "file")
        return (
            f"File '{path}' not found. "
            f"Create it or point --dictionary at an existing word list. "
            f"Original error: {error_str}"
        )

    # Permission problems
    if isinstance(cause, PermissionError):
        path = context.get("path", "file")
        return (
            f"Permission denied reading '{path}'. "
            f"Original error: {error_str}"
        )

    # Encoding problems
    if isinstance(cause, UnicodeDecodeError):
        path = context.get("path", "file")
        return (
            f"Could not decode '{path}' as UTF-8. "
            f"Original error: {error_str}"
        )

    # Terminal went away
    if isinstance(cause, (BrokenPipeError, EOFError)) or "terminal" in error_str.lower():
        return (
            f"Lost the terminal while trying to {operation}. "
            f"Original error: {error_str}"
        )

    # Generic error with helpful context
    return f"Failed to {operation}: {error_str}"


def suggest_troubleshooting_steps(operation: str, error: Exception) -> list[str]:
    """Suggest troubleshooting steps based on the operation and error."""
    cause = error.__cause__ or error
    suggestions = []

    if isinstance(cause, FileNotFoundError):
        if "dictionary" in operation.lower():
            suggestions.extend([
                "Run from the directory that holds dictionary.txt",
                "Pass --dictionary /path/to/words.txt",
                "Set dictionary_path in your config file",
            ])
        else:
            suggestions.append("Check the path spelling")

    elif isinstance(cause, PermissionError):
        suggestions.extend([
            "Check the file permissions",
            "Run as a user that can read the file",
        ])

    elif isinstance(cause, UnicodeDecodeError):
        suggestions.extend([
            "Re-save the word list as UTF-8",
            "Make sure the file is plain text with one word per line",
        ])

    if not suggestions:
        suggestions.extend([
            "Check the logs with -v/--verbose flag for more details",
            "Verify your configuration file is correct",
        ])

    return suggestions


def format_config_error(error: Exception) -> str:
    """Format configuration-related error messages."""
    error_str = str(error)

    if "gridedit_config path not found" in error_str.lower():
        return (
            f"Configuration error: {error_str}\n"
            "Either unset GRIDEDIT_CONFIG or point it at an existing file.\n"
            "Without it ~/.config/gridedit/config.yaml is used when present."
        )

    if "colour" in error_str.lower():
        return (
            f"Configuration error: {error_str}\n"
            "Use a colour name (white, purple, ...), a hex value such as '#ff8800' "
            "(quoted in YAML) or rgb(r,g,b)."
        )

    if "invalid" in error_str.lower():
        return (
            f"Configuration error: {error_str}\n"
            "Check your config file; it must be a YAML mapping."
        )

    return f"Configuration error: {error_str}"
