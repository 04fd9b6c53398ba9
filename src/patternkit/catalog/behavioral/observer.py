"""Observer pattern: a news publisher and its subscribers."""

from typing import List, Optional

from patternkit.domain.base.subject import Subject, Subscriber
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class NewsPublisher(Subject[str]):
    """Concrete subject: notifies subscribers whenever an article is published."""

    def __init__(self, isolate_errors: bool = False):
        super().__init__(isolate_errors=isolate_errors)
        self.latest_article: Optional[str] = None

    def publish_article(self, article: str) -> None:
        self.latest_article = article
        logger.info("Article published", article=article)
        self.notify(article)


class NewsSubscriber(Subscriber[str]):
    """Concrete subscriber: records every notification it receives."""

    def __init__(self, name: str):
        self.name = name
        self.messages: List[str] = []

    def update(self, payload: str) -> None:
        message = f"Hey {self.name}, a new article is published: '{payload}'"
        self.messages.append(message)
        logger.info(message)

    def __repr__(self) -> str:
        return f"NewsSubscriber({self.name!r})"
