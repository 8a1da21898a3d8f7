#!/usr/bin/env python3
from pathlib import Path
from typing import List, Optional

import click

from . import __version__
from .commit_message import CommitMessageValidator
from .config import Config
from .errors import CommitMessageReadError
from .observers import ConsoleReportObserver, FileLogObserver, ValidationObserver
from .resolver import MessageSourceResolver


def build_observers(
    repo_path: Path, config: Config, log_file: Optional[Path]
) -> List[ValidationObserver]:
    """Console reporting always, file logging when a log file is configured."""
    observers: List[ValidationObserver] = [ConsoleReportObserver()]
    if log_file is not None:
        observers.append(FileLogObserver(str(log_file)))
    elif config.get_log_file() is not None:
        observers.append(FileLogObserver(str(repo_path / config.get_log_file())))
    return observers


def run_check(
    commit_msg_file: Optional[str],
    repo_path: Path,
    config: Config,
    observers: List[ValidationObserver],
) -> bool:
    """Resolve the commit message, validate its subject and notify observers.

    Returns True when the subject is valid.
    """
    resolver = MessageSourceResolver(repo_path)
    try:
        message = resolver.resolve(commit_msg_file)
    except CommitMessageReadError as e:
        for observer in observers:
            observer.on_read_failed(e)
        return False

    source = commit_msg_file if commit_msg_file is not None else "latest commit"
    for observer in observers:
        observer.on_message_resolved(source)

    result = CommitMessageValidator(config.max_subject_length).check(message)
    for observer in observers:
        observer.on_validation_completed(result)
    return result.is_valid


@click.command()
@click.argument("commit_msg_file", required=False)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log checks to (overrides config setting)",
)
@click.version_option(__version__, prog_name="git-commit-check")
@click.pass_context
def main(
    ctx: click.Context,
    commit_msg_file: Optional[str],
    path: Path,
    log_file: Optional[Path],
):
    """
    Validate git commit messages.

    Checks the subject line of COMMIT_MSG_FILE, or of the latest commit when
    no file is given, against the <type>(<scope>): <description> convention.

    Configuration can be set in .gitcommitcheck.toml in the repository root.
    Command line options override configuration file settings.
    """
    try:
        repo_path = path.absolute()
        config = Config.load(repo_path)
        observers = build_observers(repo_path, config, log_file)
        valid = run_check(commit_msg_file, repo_path, config, observers)
    except KeyboardInterrupt:
        click.echo("Operation cancelled by user", err=True)
        valid = False

    ctx.exit(0 if valid else 1)


if __name__ == "__main__":
    main()
