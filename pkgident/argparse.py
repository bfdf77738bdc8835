"""An argument parser that reports failures instead of exiting."""

import argparse
import sys


class ArgsParseFailure(RuntimeError):
    """Raised by `ArgumentParser` where argparse would call `sys.exit`.

    Attributes:
        status: The exit status argparse asked for.
    """

    def __init__(self, status: int = 0) -> None:
        self.status = status
        super().__init__()


class ArgumentParser(argparse.ArgumentParser):
    """An `argparse.ArgumentParser` bound to a replaceable `sys` module.

    Help, usage, version and error messages go to the streams of the
    `sys_` keyword argument, so callers and tests can capture them.
    """

    def __init__(self, *a, **kw) -> None:
        self.sys = kw.pop("sys_", sys)
        super().__init__(*a, **kw)

    def _print_message(self, message: str, file=None) -> None:
        if file is None or file is sys.stdout:
            file = self.sys.stdout
        elif file is sys.stderr:
            file = self.sys.stderr
        super()._print_message(message, file)

    def exit(self, status: int = 0, message: str | None = None) -> None:  # type: ignore
        if message:
            self._print_message(message, self.sys.stderr)

        raise ArgsParseFailure(status)
