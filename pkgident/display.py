"""Rendering of package identities for the command line."""

from collections.abc import Sequence
from os import PathLike, fspath
from typing import IO, Any

from ruamel.yaml import YAML

from .types import Identity, Update

FORMATS = ("plain", "yaml")


class IdentityDisplay:
    """Writes identities to `output` in plain or YAML format.

    Plain output is written as soon as an identity is shown. YAML output
    is collected and written as a single list by `finish`.
    """

    def __init__(self, output: IO, fmt: str = "plain") -> None:
        if fmt not in FORMATS:
            raise ValueError(f"unknown output format {fmt!r}")
        self.output = output
        self.format = fmt
        self._documents: list[dict[str, Any]] = []

    def println(self, msg: str = "", eol: str = "\n") -> None:
        self.output.write(msg + eol)

    def show_identity(
        self,
        path: str | PathLike,
        identity: Identity,
        history: Sequence[Update] | None = None,
    ) -> None:
        """Shows the identity loaded from `path`.

        Args:
            path: The file the identity was loaded from.
            identity: The identity to show.
            history: The update history, shown when given.
        """
        if self.format == "yaml":
            doc: dict[str, Any] = {"path": fspath(path)}
            doc.update(identity.as_dict())
            if history is not None:
                doc["history"] = [x._asdict() for x in history]
            self._documents.append(doc)
            return

        self.println(f"{identity.name}\t{identity.version}\t{identity.release}")
        for x in history or ():
            self.println(
                "\t{0}\t{1}\t{2}\t{3} <{4}>".format(
                    x.release,
                    x.version.strip(),
                    x.date.strip(),
                    x.author.strip(),
                    x.email.strip(),
                )
            )

    def finish(self) -> None:
        """Writes out everything collected for YAML output."""
        if self.format != "yaml" or not self._documents:
            return
        yaml = YAML()
        yaml.default_flow_style = False
        yaml.dump(self._documents, self.output)
        self._documents = []
