"""A logging formatter that adds color to the output."""

import logging

(BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE) = list(range(8))

RESET_SEQ = "\033[0m"
COLOR_SEQ = "\033[1;{}m"

COLORS = {
    "WARNING": YELLOW,
    "INFO": GREEN,
    "DEBUG": BLUE,
    "CRITICAL": RED,
    "ERROR": RED,
}


class ColorFormatter(logging.Formatter):
    """A logging formatter that colors the level name.

    Debug records are additionally tagged with the module and function
    that emitted them.
    """

    def formatColor(self, record: logging.LogRecord) -> str:
        """Formats the log level name of `record` with ANSI color codes.

        Args:
            record: The record being formatted.

        Returns:
            The colorized log level name.
        """
        levelname = record.levelname
        color = COLOR_SEQ.format(30 + COLORS.get(levelname, WHITE))
        out = "\033[2K" + color + levelname.lower() + RESET_SEQ
        if levelname == "DEBUG":
            out += " [{!s}:{!s}]".format(record.module, record.funcName) + RESET_SEQ
        return out

    def format(self, record: logging.LogRecord) -> str:
        if self._fmt and self._fmt.find("%(levelname)") >= 0:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = self.formatColor(record)

        return logging.Formatter.format(self, record)


def create_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Creates a logger with a colorized output.

    Calling it again for the same name does not add a second handler.

    Args:
        name: The name of the logger.
        level: The logging level.

    Returns:
        A configured `logging.Logger` instance.
    """
    out = logging.getLogger(name) if name else logging.getLogger()
    out.setLevel(level)
    if not any(isinstance(h.formatter, ColorFormatter) for h in out.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ColorFormatter("%(levelname)s: %(message)s"))
        out.addHandler(handler)
    return out
