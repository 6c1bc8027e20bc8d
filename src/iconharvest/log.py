"""Console logging setup."""

import logging

COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",  # green
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[1;31m",  # bold red
}
COLOR_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    def format(self, record):
        # Colour a copy so other handlers still see the plain level name.
        record = logging.makeLogRecord(record.__dict__)
        color = COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{COLOR_RESET}"
        return super().format(record)


def setup_logging(debug: bool = False) -> None:
    """Log to stderr with coloured level names.

    Replaces the handler of an earlier call, so stderr is picked up afresh.
    """
    for handler in list(logging.root.handlers):
        if isinstance(handler.formatter, ColorFormatter):
            logging.root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("%(levelname)s %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG if debug else logging.INFO)
