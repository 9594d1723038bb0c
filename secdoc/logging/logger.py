import logging
import sys
from typing import TextIO


class Log:
    """Centralized pipeline logging.

    Keyword context is appended to the message as ``key=value`` pairs so it
    survives the plain stream formatter.
    """

    _logger: logging.Logger = logging.getLogger("secdoc")
    _handler: logging.StreamHandler | None = None  # type: ignore[type-arg]

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and point a single handler at ``stream``.

        ``stream`` defaults to the current stdout. Commands whose stdout is
        machine-readable pass ``sys.stderr``.
        """
        target = stream if stream is not None else sys.stdout
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if cls._handler is None:
            cls._handler = logging.StreamHandler(target)
            cls._handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(cls._handler)
        else:
            cls._handler.setStream(target)
        # provider SDK transports are chatty at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(cls._render(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(cls._render(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(cls._render(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(cls._render(message, context))

    @staticmethod
    def _render(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} ({pairs})"
