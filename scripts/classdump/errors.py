"""Error types for the class-dump formatter."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    USAGE_ERROR = 1
    INVALID_DATA = 2
    DUMP_TOOL_ERROR = 3
    FILE_SYSTEM_ERROR = 4
    STRUCTURAL_ERROR = 5


class FormatterError(Exception):
    """Base error for a failed formatter run.

    Every error aborts the run. The CLI maps ``exit_code`` to the process
    exit status and prints ``to_json()`` to stderr.
    """

    error_type = "formatter_error"
    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def to_json(self) -> dict[str, Any]:
        """Serialize error to JSON format for machine parsing."""
        result: dict[str, Any] = {
            "error": self.error_type,
            "message": self.message,
        }
        if self.path:
            result["path"] = self.path
        return result

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} | path: {self.path}"
        return self.message


class ArgumentError(FormatterError):
    """Wrong command-line arguments."""

    error_type = "invalid_arguments"
    exit_code = ExitCode.USAGE_ERROR

    def __init__(self, message: str, usage: str = ""):
        super().__init__(message)
        self.usage = usage


class ConfigError(FormatterError):
    """Error in formatter configuration."""

    error_type = "config_invalid"
    exit_code = ExitCode.USAGE_ERROR


class InvalidDataError(FormatterError):
    """class-dump produced output that is not valid text."""

    error_type = "invalid_data"
    exit_code = ExitCode.INVALID_DATA


class DumpToolError(FormatterError):
    """The class-dump executable could not be run."""

    error_type = "dump_tool_failed"
    exit_code = ExitCode.DUMP_TOOL_ERROR


class InvalidFileURLError(FormatterError):
    """An output path could not be built from the directory and file name."""

    error_type = "invalid_file_url"
    exit_code = ExitCode.FILE_SYSTEM_ERROR


class OutputWriteError(FormatterError):
    """Creating the output directory or writing a file failed."""

    error_type = "output_write_failed"
    exit_code = ExitCode.FILE_SYSTEM_ERROR


class StructuralError(FormatterError):
    """A declaration block had no first line to name it by."""

    error_type = "structural_error"
    exit_code = ExitCode.STRUCTURAL_ERROR
