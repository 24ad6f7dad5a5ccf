from dataclasses import dataclass
from typing import Type
from typing_extensions import Self
from pygit2 import Commit

from gitlog.cmd.constants import GitLogConstants


@dataclass(frozen=True)
class CommitRecord:
    object_id: str
    author_name: str
    author_email: str
    author_timestamp: int
    message: str

    @classmethod
    def from_commit(cls: Type[Self], commit: Commit) -> Self:
        return cls(
            object_id=str(commit.id),
            author_name=commit.author.name,
            author_email=commit.author.email,
            author_timestamp=commit.author.time,
            message=commit.message)

    @property
    def short_id(self) -> str:
        return self.object_id[:GitLogConstants.SHORT_ID_LENGTH]

    @property
    def summary(self) -> str:
        return self.message.split('\n', 1)[0].removesuffix('\r')


@dataclass(frozen=True)
class LogQuery:
    repository_name: str
    oneline: bool = False
    color: bool = False
