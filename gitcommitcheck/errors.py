"""Errors raised while obtaining a commit message."""


class CommitMessageReadError(RuntimeError):
    """The commit message could not be obtained.

    ``str(error)`` is the one-line diagnostic shown to the user.
    """

    def __init__(self, message: str, cause: str):
        super().__init__(message)
        self.cause = cause


class CommitFileReadError(CommitMessageReadError):
    """A commit message file could not be read or decoded."""

    def __init__(self, path: str, cause: str):
        super().__init__(f"Failed to read commit message file '{path}': {cause}", cause)
        self.path = path


class LatestCommitReadError(CommitMessageReadError):
    """``git log`` failed or could not be started."""

    def __init__(self, cause: str):
        super().__init__(f"Failed to read latest commit message: {cause}", cause)
