from pathlib import Path
from typing import Union
import logging
import os

from pygit2 import Repository, GitError
from pygit2.enums import RepositoryOpenFlag, SortMode

from gitlog.cmd.log_record import CommitRecord
from gitlog.errors import RepositoryNotFoundError

logger = logging.getLogger("gitlog.pygitutils")


def resolve_repo_path(root: Union[str, Path], name: str) -> Path:
    root = Path(root).resolve()
    try:
        path = (root / name).resolve()
    except (ValueError, OSError) as e:
        raise RepositoryNotFoundError.outside_root(name) from e
    if not path.is_relative_to(root):
        raise RepositoryNotFoundError.outside_root(name)
    return path


def open_repository(path: Union[str, Path]) -> Repository:
    if not os.path.isdir(path):
        raise RepositoryNotFoundError.missing_directory(path)
    try:
        # Never walk up into an enclosing repository
        return Repository(str(path), RepositoryOpenFlag.NO_SEARCH)
    except GitError as e:
        raise RepositoryNotFoundError.not_a_repository(path) from e


def get_repo_log(repo: Repository) -> list[CommitRecord]:
    try:
        if repo.head_is_unborn:
            return []
        commits = []
        for c in repo.walk(repo.head.target, SortMode.TIME):
            commits.append(CommitRecord.from_commit(c))
    except (GitError, KeyError) as e:
        raise RepositoryNotFoundError.unreadable(repo.path, e) from e
    return commits


def read_log(path: Union[str, Path]) -> list[CommitRecord]:
    repo = open_repository(path)
    try:
        commits = get_repo_log(repo)
    finally:
        repo.free()
    logger.debug("Read %d commits from %s", len(commits), path)
    return commits
