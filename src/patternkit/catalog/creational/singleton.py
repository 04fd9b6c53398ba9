"""Singleton: one application-wide object reached through its accessor."""

import itertools

from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.patterns.singleton_access import Singleton

logger = get_logger(__name__)

_instance_counter = itertools.count(1)


class AppSingleton(Singleton):
    """Only AppSingleton.get_instance() can produce this object."""

    def __init__(self):
        self.instance_number = next(_instance_counter)

    def do_something(self) -> str:
        logger.info("Doing something...", instance_number=self.instance_number)
        return "Doing something..."
