import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


def _env(environ: Mapping[str, str], key: str, default: str) -> str:
    return environ.get(key) or default


@dataclass(frozen=True)
class OutputNaming:
    """Where results go: the output directory and file names are built from these"""

    name: str = "Name"
    lastname: str = "Lastname"
    author_id: str = "000000"
    username: str = "user"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "OutputNaming":
        return cls(
            name=_env(environ, "FILECALC_NAME", cls.name),
            lastname=_env(environ, "FILECALC_LASTNAME", cls.lastname),
            author_id=_env(environ, "FILECALC_ID", cls.author_id),
            username=_env(environ, "USER", cls.username),
        )

    def default_output_dir(self, input_path: str | Path) -> Path:
        return Path(f"{_stem(input_path)}_{self.username}_{self.author_id}")

    def output_filename(self, input_path: str | Path) -> str:
        return f"{_stem(input_path)}_{self.name}_{self.lastname}_{self.author_id}.txt"


def _stem(path: str | Path) -> str:
    # Path("dir/").name drops the trailing slash, so directories work too
    return Path(path).stem
