"""Console logging for Mazechase.

Every line carries a channel tag and colour so per-tick engine traces
(pursuit turns, pellets eaten), game lifecycle notices and errors stay
distinguishable in a scrolling terminal. The tags keep them apart when
colour is off.

Environment:
    MAZECHASE_NO_COLOR  plain text, no ANSI codes
    MAZECHASE_VERBOSE   enable per-tick engine traces
"""

import os
from enum import Enum

RESET = "\033[0m"
BOLD = "\033[1m"


class Channel(Enum):
    """Kind of message, as ``(tag, ANSI colour)``."""

    ENGINE = ("[•]", "\033[94m")
    ERROR = ("[!]", "\033[91m")
    SUCCESS = ("[✓]", "\033[92m")
    INFO = ("[i]", "\033[96m")

    @property
    def tag(self) -> str:
        return self.value[0]

    @property
    def ansi(self) -> str:
        return self.value[1]


def colored(text: str, channel: Channel, bold: bool = False) -> str:
    """Wrap text in the channel's colour unless MAZECHASE_NO_COLOR is set."""
    if os.getenv("MAZECHASE_NO_COLOR"):
        return text
    prefix = BOLD + channel.ansi if bold else channel.ansi
    return f"{prefix}{text}{RESET}"


def emit(channel: Channel, message: str) -> None:
    # Errors are bold so they stand out between per-tick traces.
    line = f"{channel.tag} {message}"
    print(colored(line, channel, bold=channel is Channel.ERROR))


def verbose_enabled() -> bool:
    return bool(os.getenv("MAZECHASE_VERBOSE"))


def log_debug(message: str) -> None:
    """Per-tick engine trace, printed only with MAZECHASE_VERBOSE."""
    if verbose_enabled():
        emit(Channel.ENGINE, message)


def log_error(message: str) -> None:
    emit(Channel.ERROR, message)


def log_success(message: str) -> None:
    emit(Channel.SUCCESS, message)


def log_info(message: str) -> None:
    emit(Channel.INFO, message)
