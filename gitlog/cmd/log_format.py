from datetime import datetime, tzinfo
from typing import Iterable, Optional

from colorama import Fore, Style

from gitlog.cmd.constants import GitLogConstants
from gitlog.cmd.log_record import CommitRecord


class PlainColors:
    """Color scheme that leaves every piece of text untouched."""

    def object_id(self, text: str) -> str:
        return text

    def message(self, text: str) -> str:
        return text

    def author(self, text: str) -> str:
        return text

    def date(self, text: str) -> str:
        return text

    def error(self, text: str) -> str:
        return text


class AnsiColors(PlainColors):
    """Wraps each piece of text in ANSI escape codes, for terminals and xterm.js."""

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{Style.RESET_ALL}"

    def object_id(self, text: str) -> str:
        return self._paint(Fore.YELLOW, text)

    def message(self, text: str) -> str:
        return self._paint(Fore.WHITE, text)

    def author(self, text: str) -> str:
        return self._paint(Fore.CYAN, text)

    def date(self, text: str) -> str:
        return self._paint(Fore.GREEN, text)

    def error(self, text: str) -> str:
        return self._paint(Fore.RED, text)


def color_scheme(color: bool) -> PlainColors:
    return AnsiColors() if color else PlainColors()


class LogFormatter(GitLogConstants):
    def __init__(self, colors: Optional[PlainColors] = None, tz: Optional[tzinfo] = None):
        self.colors = colors if colors else PlainColors()
        # None means the local timezone of the process
        self.tz = tz

    def format_date(self, timestamp: int) -> str:
        date = datetime.fromtimestamp(timestamp, tz=self.tz).astimezone(self.tz)
        return date.strftime(self.DATE_FORMAT)

    def format_oneline(self, commit: CommitRecord) -> str:
        return "%s %s" % (self.colors.object_id(commit.short_id),
                          self.colors.message(commit.summary))

    def format_verbose(self, commit: CommitRecord) -> str:
        c = self.colors
        return "\n".join([
            c.object_id(f"commit {commit.object_id}"),
            f"Author: {c.author(commit.author_name)} <{c.author(commit.author_email)}>",
            f"Date:   {c.date(self.format_date(commit.author_timestamp))}",
            "",
            self.MESSAGE_INDENT + c.message(commit.message.strip()),
            "",
        ])

    def format(self, commits: Iterable[CommitRecord], oneline: bool = False) -> str:
        format_commit = self.format_oneline if oneline else self.format_verbose
        return "\n".join(format_commit(c) for c in commits)


def format_log(commits: Iterable[CommitRecord], oneline: bool = False, color: bool = False) -> str:
    return LogFormatter(color_scheme(color)).format(commits, oneline)
