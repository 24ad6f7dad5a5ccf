from pathlib import Path
from typing import Type, Union
from typing_extensions import Self

from gitlog.cmd.constants import GitLogConstants


class GitLogException(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)


class RepositoryNotFoundError(GitLogException):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)

    @classmethod
    def missing_directory(cls: Type[Self], path: Union[str, Path]) -> Self:
        return cls(f"Repository directory '{path}' does not exist.")

    @classmethod
    def not_a_repository(cls: Type[Self], path: Union[str, Path]) -> Self:
        return cls(f"Could not find a git repository at '{path}'.")

    @classmethod
    def unreadable(cls: Type[Self], path: Union[str, Path], reason: BaseException) -> Self:
        return cls(f"Could not read the history of '{path}': {reason}")

    @classmethod
    def outside_root(cls: Type[Self], name: str) -> Self:
        return cls(f"Repository '{name}' is not inside the repository root.")


class UsageError(GitLogException):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)

    @classmethod
    def no_repository(cls: Type[Self]) -> Self:
        return cls(f"No repository specified. {GitLogConstants.USAGE}")


def format_error(e: BaseException) -> str:
    message = str(e) or e.__class__.__name__
    return f"Error: {message}"
