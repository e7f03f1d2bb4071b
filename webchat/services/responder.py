"""
Rule-based response engine.

Messages are matched against an ordered list of conversational patterns, then the
knowledge base, then "what is" / "how to" / "why" question templates. The first
rule that matches produces the reply. Anything left over is `Unknown`, which the
chat endpoint treats as the cue to search the web.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Mapping, Pattern, Sequence, Union

from loguru import logger

from webchat.services.knowledge_base import KNOWLEDGE_BASE, find_in_text, lookup

UNKNOWN_TEXT = (
    "I don't have specific information on that topic in my knowledge base, "
    "but I'll search the web for you!"
)


@dataclass(frozen=True)
class Answered:
    text: str


@dataclass(frozen=True)
class Unknown:
    text: str = UNKNOWN_TEXT


Reply = Union[Answered, Unknown]


# ─────────────────────────────────────────────────────────
#  CONVERSATIONAL PATTERNS
# ─────────────────────────────────────────────────────────

_GREETING = re.compile(r'^(hello|hi|hey|greetings)', re.IGNORECASE)
_IDENTITY = re.compile(r'who are you|what are you', re.IGNORECASE)
_FAREWELL = re.compile(r'goodbye|bye|see you', re.IGNORECASE)
_THANKS = re.compile(r'thank you|thanks', re.IGNORECASE)
_TIME = re.compile(r'what time|what is the time|current time', re.IGNORECASE)
_CAPABILITIES = re.compile(r'what can you do|help me with|what do you know', re.IGNORECASE)

_WHAT_IS = re.compile(r'what is ([a-z\s]+)', re.IGNORECASE)
_HOW_TO = re.compile(r'how to|how do i|steps to', re.IGNORECASE)
_WHY = re.compile(r'why is|why are|why does', re.IGNORECASE)

GREETING_RESPONSE = "Hello! I'm your chatbot assistant. How can I help you today?"
IDENTITY_RESPONSE = (
    "I'm a chatbot built with FastAPI and Python. I can answer questions from my "
    "knowledge base and search the web for information I don't know!"
)
FAREWELL_RESPONSE = "Goodbye! Feel free to come back if you have more questions."
THANKS_RESPONSE = "You're welcome! Is there anything else you'd like to know?"
CAPABILITIES_RESPONSE = (
    "I can answer questions about various technology topics from my knowledge base, "
    "and for other topics, I can search the web to find information. Just ask me anything!"
)


# ─────────────────────────────────────────────────────────
#  TOPIC EXTRACTION
# ─────────────────────────────────────────────────────────

TOPIC_PREFIXES = (
    re.compile(
        r'^(what is|what are|who is|how to|how do i|why is|why are|why does|how does|tell me about) ',
        re.IGNORECASE,
    ),
)

SEARCH_PREFIXES = (
    re.compile(
        r'^(what|who|when|where|why|how) (is|are|was|were|do|does|did|can|could|would|should) ',
        re.IGNORECASE,
    ),
    re.compile(r'^(tell me about|explain|describe) ', re.IGNORECASE),
)


def extract_topic(text: str, prefixes: Sequence[Pattern] = TOPIC_PREFIXES) -> str:
    """
    Lowercase `text`, strip the leading question phrase matched by each of
    `prefixes` in turn, drop every "?" and trim surrounding whitespace.

    >>> extract_topic("how to learn python?")
    'learn python'
    """
    topic = text.lower()
    for prefix in prefixes:
        topic = prefix.sub('', topic, count=1)
    return topic.replace('?', '').strip()


def extract_search_term(query: str) -> str:
    """Reduce a free-text question to a search-engine query."""
    return extract_topic(query, SEARCH_PREFIXES)


# ─────────────────────────────────────────────────────────
#  TEMPLATES
# ─────────────────────────────────────────────────────────

def generate_how_to_response(topic: str) -> str:
    return (
        f"To work with {topic}, you would typically follow these steps:\n"
        "\n"
        "1. Learn the basic concepts and principles\n"
        "2. Set up your development environment\n"
        "3. Start with small, simple projects\n"
        "4. Practice regularly and build increasingly complex applications\n"
        "5. Use resources like documentation, tutorials, and community forums\n"
        "\n"
        f"For more specific guidance, I recommend looking at official documentation "
        f"or specialized tutorials for {topic}."
    )


def generate_why_response(topic: str) -> str:
    return (
        f"{topic} is valuable in the tech industry for several reasons:\n"
        "\n"
        "1. It solves specific problems efficiently\n"
        "2. It's widely used and supported by a strong community\n"
        "3. It has proven to be effective in real-world applications\n"
        "4. It integrates well with other technologies\n"
        "5. It continues to evolve and improve\n"
        "\n"
        "The specific benefits depend on your use case and requirements."
    )


def _time_response(now: datetime) -> str:
    return f"The current time is {now.strftime('%X')}."


# ─────────────────────────────────────────────────────────
#  MAIN RESPONSE FUNCTION
# ─────────────────────────────────────────────────────────

def respond(
    message: str,
    knowledge: Mapping[str, str] = KNOWLEDGE_BASE,
    clock: Callable[[], datetime] = datetime.now,
) -> Reply:
    """
    Map a user message to a reply. Rules are tried in a fixed order and the
    first hit wins; the order is part of the observable behaviour.
    """
    text = message.lower()

    # ── 1. Conversational patterns ──────────────────────
    if _GREETING.match(text):
        return Answered(GREETING_RESPONSE)
    if _IDENTITY.search(text):
        return Answered(IDENTITY_RESPONSE)
    if _FAREWELL.search(text):
        return Answered(FAREWELL_RESPONSE)
    if _THANKS.search(text):
        return Answered(THANKS_RESPONSE)
    if _TIME.search(text):
        return Answered(_time_response(clock()))
    if _CAPABILITIES.search(text):
        return Answered(CAPABILITIES_RESPONSE)

    # ── 2. Knowledge base (substring scan) ──────────────
    kb = find_in_text(text, knowledge)
    if kb is not None:
        return Answered(kb)

    # ── 3. "What is X" exact lookup ─────────────────────
    what_is = _WHAT_IS.search(text)
    if what_is:
        topic = re.sub(r'\s+', '', what_is.group(1).strip())
        kb = lookup(topic, knowledge)
        if kb is not None:
            return Answered(kb)

    # ── 4. Question templates ───────────────────────────
    if _HOW_TO.search(text):
        return Answered(generate_how_to_response(extract_topic(text)))
    if _WHY.search(text):
        return Answered(generate_why_response(extract_topic(text)))

    logger.debug(f"No local answer for: '{message[:50]}'")
    return Unknown()
