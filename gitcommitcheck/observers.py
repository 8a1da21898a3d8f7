"""Observer pattern for reporting commit message checks."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console

from .models import ValidationResult

VALID_MESSAGE = "Commit message is valid."
INVALID_HEADER = "Commit message is invalid:"


class ValidationObserver(ABC):
    """Abstract base class for check observers."""

    @abstractmethod
    def on_message_resolved(self, source: str) -> None:
        """Called once the commit message text has been obtained."""
        pass

    @abstractmethod
    def on_validation_completed(self, result: ValidationResult) -> None:
        """Called with the outcome of validating the subject line."""
        pass

    @abstractmethod
    def on_read_failed(self, error: Exception) -> None:
        """Called when the commit message could not be obtained."""
        pass


class ConsoleReportObserver(ValidationObserver):
    """Observer that reports the outcome on stdout and stderr."""

    def __init__(
        self, console: Optional[Console] = None, err_console: Optional[Console] = None
    ):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def _print(self, console: Console, text: str) -> None:
        # Bypasses rich rendering so tabs and control characters reach the stream unchanged
        console.file.write(text + "\n")
        console.file.flush()

    def on_message_resolved(self, source: str) -> None:
        pass

    def on_validation_completed(self, result: ValidationResult) -> None:
        if result.is_valid:
            self._print(self.console, VALID_MESSAGE)
            return
        self._print(self.err_console, INVALID_HEADER)
        for violation in result.violations:
            self._print(self.err_console, f"- {violation}")

    def on_read_failed(self, error: Exception) -> None:
        self._print(self.err_console, str(error))


class FileLogObserver(ValidationObserver):
    """Observer that logs checks to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_message_resolved(self, source: str) -> None:
        self._log(f"Read commit message from {source}")

    def on_validation_completed(self, result: ValidationResult) -> None:
        if result.is_valid:
            self._log(f"Valid subject: {result.subject}")
            return
        self._log(f"Invalid subject: {result.subject}")
        for violation in result.violations:
            self._log(f"  - {violation}")

    def on_read_failed(self, error: Exception) -> None:
        self._log(str(error))
