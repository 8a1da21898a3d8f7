"""Locating the commit message to check."""
import os
from pathlib import Path
from typing import Dict, Optional, Union

# A missing git executable only fails the latest commit lookup
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from git import Git, GitCommandNotFound  # noqa: E402

from .errors import CommitFileReadError, LatestCommitReadError  # noqa: E402

LATEST_COMMIT_MESSAGE_ARGS = ["log", "-1", "--pretty=%B"]
LOCALE_VARIABLES = ("LANGUAGE", "LC_ALL")


def _user_locale_env() -> Dict[str, str]:
    """The user's locale variables, overriding the C locale GitPython forces on git."""
    return {name: os.environ.get(name, "") for name in LOCALE_VARIABLES}


def _lossy(value: Union[str, bytes]) -> str:
    """Decode git output, replacing invalid UTF-8 sequences."""
    if isinstance(value, str):
        # GitPython hands back stderr decoded with surrogateescape
        value = value.encode("utf-8", "surrogateescape")
    return value.decode("utf-8", errors="replace")


class MessageSourceResolver:
    """Reads a commit message from a file or from the latest commit."""

    def __init__(self, repo_path: Union[str, Path] = "."):
        self.repo_path = str(repo_path)

    def resolve(self, explicit_path: Optional[str] = None) -> str:
        """Return the full commit message text.

        Args:
            explicit_path: Commit message file, as passed to a ``commit-msg``
                hook. When omitted the latest commit's message is used.

        Raises:
            CommitFileReadError: The file is missing, unreadable or not UTF-8.
            LatestCommitReadError: ``git log`` failed or git is unavailable.
        """
        if explicit_path is not None:
            return self.read_file(explicit_path)
        return self.read_latest_commit_message()

    def read_file(self, path: str) -> str:
        try:
            return Path(path).read_bytes().decode("utf-8")
        except OSError as e:
            raise CommitFileReadError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise CommitFileReadError(path, str(e)) from e

    def read_latest_commit_message(self) -> str:
        """Run ``git log -1 --pretty=%B`` in the repository directory."""
        try:
            status, stdout, stderr = Git(self.repo_path).execute(
                ["git", *LATEST_COMMIT_MESSAGE_ARGS],
                with_extended_output=True,
                with_exceptions=False,
                stdout_as_string=False,
                env=_user_locale_env(),
            )
        except GitCommandNotFound as e:
            cause = e.__cause__ or e
            raise LatestCommitReadError(str(cause)) from e
        except OSError as e:
            raise LatestCommitReadError(e.strerror or str(e)) from e

        if status != 0:
            raise LatestCommitReadError(_lossy(stderr).strip())

        return _lossy(stdout)


def resolve(explicit_path: Optional[str] = None, repo_path: Union[str, Path] = ".") -> str:
    """Return the commit message from ``explicit_path`` or the latest commit."""
    return MessageSourceResolver(repo_path).resolve(explicit_path)
