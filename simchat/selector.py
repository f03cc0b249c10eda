# simchat/selector.py
from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from .models import Message
from .rules import DEFAULT_RULES, Rule, fallback_reply
from .utils import last_message_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResponseSelector:
    """
    Rule-based stand-in for a language model.

    Responsibilities
    ----------------
    1. Read the last message of the conversation (lowercased)
    2. Try each rule in order, first reply wins          -> rules.Rule
    3. Otherwise pick a generic reply at random           -> rules.fallback_reply

    The clock and the random source are collaborators so callers (and tests)
    can pin them down.
    """

    def __init__(
        self,
        rules: Optional[Iterable[Rule]] = None,
        clock: Callable[[], datetime] = datetime.now,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rules = tuple(DEFAULT_RULES if rules is None else rules)
        self._clock = clock
        self._rng = rng or random.Random()

    @property
    def rules(self) -> Sequence[Rule]:
        return self._rules

    def reply(self, messages: Sequence[Message]) -> str:
        """
        Produce one reply for the conversation.

        Parameters
        ----------
        messages : Sequence[Message]
            Full history, oldest first. May be empty; it is never modified.

        Returns
        -------
        str
            A non-empty reply.
        """
        text = last_message_text(messages)
        for rule in self._rules:
            answer = rule.apply(text, self)
            if answer is not None:
                logger.debug("Rule %s matched", rule.name)
                return answer
        logger.debug("No rule matched, using fallback")
        return fallback_reply(text, self)

    # helpers used by rule producers
    def now(self) -> datetime:
        return self._clock()

    def choose(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)
