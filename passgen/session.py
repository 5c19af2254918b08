"""
Generator session: the glue between a front end and the generator.

Holds the password currently on display, turns configuration errors
into notifications and auto-copies fresh passwords. Knows nothing about
widgets; the Qt window hands it callables.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .clipboard import Notification, ERROR
from .config import GenerationConfig, InvalidConfig
from .entropy import RandomSource
from .generator import generate_password

logger = logging.getLogger(__name__)

Notifier = Callable[[Notification], None]
Copier = Callable[[str], Notification]


class GeneratorSession:
    def __init__(
        self,
        notify: Notifier,
        copier: Optional[Copier] = None,
        random_source: Optional[RandomSource] = None,
        auto_copy: bool = True,
    ) -> None:
        self._notify = notify
        self._copier = copier
        self._random_source = random_source
        self.auto_copy = auto_copy
        self.password: str = ""

    def generate(self, config: GenerationConfig) -> Optional[str]:
        """
        Generate a new password for `config`.

        On InvalidConfig an error notification is emitted and the
        previous password is kept. Returns the new password or None.
        """
        try:
            password = generate_password(config, self._random_source)
        except InvalidConfig as exc:
            logger.info("Generation rejected: %s", exc)
            self._notify(Notification(str(exc), ERROR))
            return None

        self.password = password
        if self.auto_copy:
            self.copy()
        return password

    def copy(self) -> Optional[Notification]:
        """
        Copy the current password. Does nothing when there is none yet
        or no copier was supplied.
        """
        if not self.password or self._copier is None:
            return None
        notification = self._copier(self.password)
        self._notify(notification)
        return notification
