import pytest
import tempfile
from pathlib import Path
from git import Repo

@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with a conventional latest commit."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("chore: initial commit")

        test_file.write_text("Parser content")
        repo.index.add(["test.txt"])
        repo.index.commit("feat(parser): handle empty input\n\nThe body is not checked.\n")

        yield tmp_dir

@pytest.fixture
def temp_git_repo_bad_commit():
    """Create a temporary git repository whose latest commit breaks the rules."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")

        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit")

        yield tmp_dir

@pytest.fixture
def empty_git_repo():
    """Create a temporary git repository without any commits."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        Repo.init(tmp_dir)
        yield tmp_dir

@pytest.fixture
def commit_msg_file(tmp_path):
    """Write a commit message file the way git does for a commit-msg hook."""
    def _write(content, name="COMMIT_EDITMSG"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write
