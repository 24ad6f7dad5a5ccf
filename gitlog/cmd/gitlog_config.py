from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Type, Union
from typing_extensions import Self
import os

from gitlog.cmd.constants import GitLogConstants


@dataclass(frozen=True)
class GitLogConfig:
    root: Path

    @classmethod
    def from_path(cls: Type[Self], root: Union[str, Path]) -> Self:
        return cls(root=Path(root).resolve())

    @classmethod
    def from_env(cls: Type[Self], environ: Optional[Mapping[str, str]] = None) -> Self:
        environ = os.environ if environ is None else environ
        root = environ.get(GitLogConstants.ROOT_ENV) or os.getcwd()
        return cls.from_path(root)
