import argparse
import sys
from typing import Optional, TextIO

from gitlog.cmd.gitlog_config import GitLogConfig
from gitlog.cmd.log_record import LogQuery
from gitlog.cmd.repo_log import RepoLog
from gitlog.errors import UsageError


def use_color(mode: str, stream: TextIO) -> bool:
    if mode == 'always':
        return True
    if mode == 'never':
        return False
    return stream.isatty()


def log(args, config: Optional[GitLogConfig] = None, stdout: Optional[TextIO] = None):
    stdout = stdout if stdout is not None else sys.stdout
    parser = argparse.ArgumentParser(
        prog='gitlog', description='Show the commit log of a repository under the repository root')
    parser.add_argument(
        'repo',
        type=str,
        nargs='?',
        default='',
        help='Name of the repository directory, relative to the repository root')
    parser.add_argument(
        '--oneline',
        action='store_true',
        help='Show each commit as its short id and first message line')
    parser.add_argument(
        '--color',
        choices=['auto', 'always', 'never'],
        default='auto',
        help=('Color the output. auto colors only when standard output'
              ' is a terminal'))
    parsed_args = parser.parse_args(args[1:])
    if not parsed_args.repo:
        raise UsageError.no_repository()

    config = config if config else GitLogConfig.from_env()
    query = LogQuery(repository_name=parsed_args.repo,
                     oneline=parsed_args.oneline,
                     color=use_color(parsed_args.color, stdout))
    formatted = RepoLog(config).render(query)
    if formatted:
        print(formatted, file=stdout)
