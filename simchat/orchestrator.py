
import logging
from typing import Sequence

from .models import Message
from .selector import ResponseSelector

logger = logging.getLogger(__name__)


class ChatOrchestrator:
    def __init__(self, selector: ResponseSelector):
        self.selector = selector

    async def handle(self, messages: Sequence[Message]) -> str:
        reply = self.selector.reply(messages)
        logger.info("Handled chat turn (history=%d message(s))", len(messages))
        return reply
