"""Terminal output and logging setup.

Assistant text and prompts go to stdout; diagnostics and log records go
to stderr so they never mix into a streamed reply.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

WELCOME_MESSAGE = "Welcome to streamchat, ask me anything!"
INSTRUCTIONS = "Type your messages and press Enter. Type 'exit' to quit."

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


class LogLevel:
    """Log level names accepted by ``--log-level``.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns WARNING if invalid."""
        return cls._from_string.get(level_str.strip().lower(), cls.WARNING)


def setup_logging(level: str = "warning", target: Console | None = None) -> logging.Logger:
    """Route the package's log records to a RichHandler on stderr.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process do not duplicate output.
    """
    pkg_logger = logging.getLogger("streamchat")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)

    handler = RichHandler(
        console=target or err_console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(LogLevel.from_string(level))
    return pkg_logger


def print_banner(target: Console | None = None) -> None:
    """Print the startup banner."""
    (target or console).print(Panel.fit(WELCOME_MESSAGE, border_style="bright_yellow"))
