"""Configuration management for git-commit-check."""
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
import tomli
import os
import re
import sys

from .commit_message.validation import DEFAULT_MAX_SUBJECT_LENGTH

DEFAULT_CONFIG_FILENAME = ".gitcommitcheck.toml"

class Config(BaseModel):
    """Configuration settings for git-commit-check.

    Settings come from ``.gitcommitcheck.toml`` in the repository root;
    command line options override them. Environment variables are not read.
    """

    max_subject_length: int = Field(
        default=DEFAULT_MAX_SUBJECT_LENGTH,
        gt=0,
        description="Maximum number of characters allowed in the subject line"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to a log file recording every check"
    )

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        dangerous_patterns = [
            r'/etc/', r'/var/', r'/usr/', r'/bin/', r'/sbin/',
            r'C:\\Windows', r'C:\\System', r'C:\\Program'
        ]

        for pattern in dangerous_patterns:
            if re.search(pattern, path, re.IGNORECASE):
                return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = Path(repo_path) / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            log_file = config_data.get('log_file')
            if log_file is not None and not (isinstance(log_file, str) and cls._is_safe_path(log_file)):
                print(f"Warning: Unsafe log file path '{log_file}', logging disabled", file=sys.stderr)
                config_data['log_file'] = None

            return cls(**config_data)
        except Exception as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}", file=sys.stderr)
            return cls()

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file, or None if logging is disabled."""
        if self.log_file and self._is_safe_path(self.log_file):
            return Path(self.log_file)
        return None
