"""Reply rules for the response selector.

Each :class:`Rule` pairs a compiled pattern with a reply producer. Rules are
tried in order against the lowercased text of the last message; the first
producer that returns a string wins. A producer returning ``None`` lets the
cascade continue.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from .utils import evaluate_arithmetic, format_number

if TYPE_CHECKING:
    from .selector import ResponseSelector


GREETING_REPLY = "Hello! I'm an AI assistant. How can I help you today?"
IDENTITY_REPLY = (
    "I'm an AI language model assistant designed to help answer questions "
    "and have conversations. I can assist with a wide variety of topics!"
)
STATUS_REPLY = (
    "I'm functioning well, thank you for asking! I'm here and ready to help "
    "you with any questions or tasks you might have."
)
CAPABILITIES_REPLY = (
    "I can help with various tasks including:\n\n"
    "• Answering general questions\n"
    "• Providing explanations\n"
    "• Having conversations\n"
    "• Offering suggestions\n"
    "• Basic calculations\n"
    "• And much more!\n\n"
    "Just ask me anything you'd like to know!"
)
GRATITUDE_REPLY = (
    "You're very welcome! If you have any other questions or need further "
    "assistance, feel free to ask!"
)
FAREWELL_REPLY = (
    "Goodbye! It was nice chatting with you. Come back anytime you need assistance!"
)
PROGRAMMING_REPLY = (
    "I'd be happy to help with programming! I can assist with various "
    "programming languages and concepts including JavaScript, Python, React, "
    "and more. Could you provide more details about what you'd like to know?"
)
WEATHER_REPLY = (
    "I don't have access to real-time weather data, but I can suggest checking "
    "weather.com or your local weather service for current conditions and forecasts!"
)

QUESTION_REPLIES: Tuple[str, ...] = (
    "That's an interesting question! Based on what you're asking, I'd say it "
    "depends on the specific context and requirements. Could you provide more details?",
    "Great question! The answer can vary, but generally speaking, it's important "
    "to consider multiple factors. What specific aspect are you most interested in?",
    "I appreciate your curiosity! To give you the most accurate answer, I'd need "
    "a bit more context about your specific situation.",
)
CONVERSATIONAL_REPLIES: Tuple[str, ...] = (
    "That's interesting! Could you tell me more about that?",
    "I understand. Is there anything specific you'd like to know or discuss about this topic?",
    "Thanks for sharing that with me. How can I assist you further?",
    "I see. What would you like to explore or learn more about?",
)

Producer = Callable[[str, "ResponseSelector"], Optional[str]]


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern
    respond: Producer

    def apply(self, text: str, selector: "ResponseSelector") -> Optional[str]:
        if self.pattern.search(text) is None:
            return None
        return self.respond(text, selector)


def _pattern(regex: str) -> re.Pattern:
    return re.compile(regex, re.IGNORECASE)


def fixed(reply: str) -> Producer:
    """Producer that always answers with `reply`."""
    def respond(text: str, selector: "ResponseSelector") -> str:
        return reply
    return respond


def answer_arithmetic(text: str, selector: "ResponseSelector") -> Optional[str]:
    result = evaluate_arithmetic(text)
    if result is None:
        return None
    return f"The answer is {format_number(result)}."


def tell_datetime(text: str, selector: "ResponseSelector") -> str:
    return f"The current date and time is: {selector.now().strftime('%c')}"


def fallback_reply(text: str, selector: "ResponseSelector") -> str:
    if "?" in text:
        return selector.choose(QUESTION_REPLIES)
    return selector.choose(CONVERSATIONAL_REPLIES)


DEFAULT_RULES: Tuple[Rule, ...] = (
    Rule("greeting", _pattern(r"^(hi|hello|hey|greetings)"), fixed(GREETING_REPLY)),
    Rule("identity", _pattern(r"(who are you|what are you|your name)"), fixed(IDENTITY_REPLY)),
    Rule("status", _pattern(r"(how are you|how's it going)"), fixed(STATUS_REPLY)),
    Rule("arithmetic", _pattern(r"what is [0-9]+[\s+\-*/]+[0-9]+"), answer_arithmetic),
    Rule("capabilities", _pattern(r"(what can you do|help me|capabilities)"), fixed(CAPABILITIES_REPLY)),
    Rule("gratitude", _pattern(r"(thank you|thanks|appreciate)"), fixed(GRATITUDE_REPLY)),
    Rule("farewell", _pattern(r"(bye|goodbye|see you|farewell)"), fixed(FAREWELL_REPLY)),
    Rule("programming", _pattern(r"(programming|code|coding|javascript|python|react)"), fixed(PROGRAMMING_REPLY)),
    Rule("weather", _pattern(r"(weather|temperature|forecast)"), fixed(WEATHER_REPLY)),
    Rule("datetime", _pattern(r"(what time|what date|current time)"), tell_datetime),
)
