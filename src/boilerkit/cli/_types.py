"""Boilerplate definitions and the setup choices offered by the CLI."""

from __future__ import annotations

import importlib.resources as ilr
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

_SCAFFOLD_PKG = "boilerkit.cli.scaffold"


def _read(filename: str) -> str:
    return ilr.files(_SCAFFOLD_PKG).joinpath(filename).read_text(encoding="utf-8")


@dataclass(frozen=True, kw_only=True)
class Boilerplate:
    """
    A fixed file written into the target project.

    Attributes:
        name: Short identifier.
        label: Display name used in console output.
        destination: Path of the file, relative to the destination root.
        content: Text written to ``destination``.
    """

    name: str
    label: str
    destination: PurePosixPath
    content: str


AXIOS = Boilerplate(
    name="axios",
    label="Axios",
    destination=PurePosixPath("src/axios/axios.tsx"),
    content=_read("axios.tsx"),
)

SOCKET = Boilerplate(
    name="socket",
    label="Socket",
    destination=PurePosixPath("src/socket/socket.ts"),
    content=_read("socket.ts"),
)


class Setup(str, Enum):
    """Available setups. Values double as the prompt labels."""

    AXIOS = "Axios"
    SOCKET = "Socket"
    BOTH = "Both"

    @property
    def label(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        descriptions: dict[Setup, str] = {
            Setup.AXIOS: f"HTTP client wrapper with interceptors → {AXIOS.destination}",
            Setup.SOCKET: f"Socket.IO client instance → {SOCKET.destination}",
            Setup.BOTH: "Axios and Socket boilerplate together.",
        }
        return descriptions[self]

    @property
    def boilerplates(self) -> tuple[Boilerplate, ...]:
        """Boilerplates written for this setup, in write order."""
        selected: dict[Setup, tuple[Boilerplate, ...]] = {
            Setup.AXIOS: (AXIOS,),
            Setup.SOCKET: (SOCKET,),
            Setup.BOTH: (AXIOS, SOCKET),
        }
        return selected[self]
