__author__ = 'Mihail Mihaylov'

import logging
import sys
import threading
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class GameLog:
    """
    Process-wide game log (Singleton).

    Use `GameLog.get_instance()` from the composition root and hand the
    returned object to whoever needs to save; do not call it from components.

    :param stream: Text stream the save lines are written to (default: stdout).
    """
    prefix = 'Writing out to the game log... '

    _instance: Optional["GameLog"] = None
    _lock = threading.Lock()

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @classmethod
    def get_instance(cls, stream: Optional[TextIO] = None) -> "GameLog":
        """
        Returns the single instance, creating it on first access.

        :param stream: Stream used only if this call creates the instance.
        :return: The shared GameLog.
        """
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(stream)
                logger.debug("Game log created")
        return cls._instance

    def write(self, message: str) -> None:
        """
        Writes one save line.

        :param message: What is being saved (e.g. "Initial Save").
        """
        stream = self._stream or sys.stdout
        print(self.prefix + message, file=stream)
        logger.debug("Saved: %s", message)
