from typing import Callable, Optional
from pathlib import Path
import logging

from gitlog.cmd.gitlog_config import GitLogConfig
from gitlog.cmd.log_format import LogFormatter, color_scheme
from gitlog.cmd.log_record import CommitRecord, LogQuery
from gitlog.pygitutils import read_log, resolve_repo_path

logger = logging.getLogger("gitlog.repo_log")

CommitSource = Callable[[Path], list[CommitRecord]]


class RepoLog:
    """Resolves repository names under the configured root and renders their log.

    Shared by the CLI and the HTTP server. Raises RepositoryNotFoundError
    when the name does not point at a git repository inside the root.
    """

    def __init__(self, config: GitLogConfig, commit_source: Optional[CommitSource] = None):
        self.config = config
        self.commit_source = commit_source if commit_source else read_log

    def repo_path(self, name: str) -> Path:
        return resolve_repo_path(self.config.root, name)

    def commits(self, name: str) -> list[CommitRecord]:
        path = self.repo_path(name)
        logger.debug("Reading log of '%s' from %s", name, path)
        return self.commit_source(path)

    def render(self, query: LogQuery) -> str:
        commits = self.commits(query.repository_name)
        formatter = LogFormatter(color_scheme(query.color))
        return formatter.format(commits, query.oneline)
