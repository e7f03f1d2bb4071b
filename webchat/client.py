"""
Console chat client: a terminal version of the browser widget.
"""

from typing import List, Optional

import httpx
from loguru import logger

from webchat.config import settings
from webchat.models.schemas import ChatMessage

WELCOME_TEXT = "Hello! How can I help you today?"
REQUEST_ERROR_TEXT = "Sorry, there was an error processing your request."
CONNECTION_ERROR_TEXT = "Sorry, there was an error connecting to the server."
API_KEY_SET_TEXT = (
    "API key has been set. You can now ask questions to get more accurate AI-powered responses."
)


class ChatTranscript:
    """Append-only message list for one session, seeded with a bot welcome."""

    def __init__(self, welcome: str = WELCOME_TEXT):
        self.messages: List[ChatMessage] = [ChatMessage(id=1, text=welcome, sender="bot")]

    def add(self, text: str, sender: str) -> ChatMessage:
        msg = ChatMessage(id=self.messages[-1].id + 1, text=text, sender=sender)
        self.messages.append(msg)
        return msg


class ChatClient:
    def __init__(
        self,
        api_url: str = settings.CHAT_API_URL,
        http: Optional[httpx.Client] = None,
    ):
        self.api_url = api_url
        self.http = http or httpx.Client(timeout=None)
        self.transcript = ChatTranscript()
        self.api_key = ""
        self.is_loading = False

    def set_api_key(self, key: str) -> Optional[ChatMessage]:
        key = key.strip()
        if not key:
            return None
        self.api_key = key
        return self.transcript.add(API_KEY_SET_TEXT, "bot")

    def send(self, text: str) -> Optional[ChatMessage]:
        """
        Post `text` to the chat endpoint and record both sides of the turn.
        Blank input, or input while a request is in flight, is ignored.
        """
        if not text.strip() or self.is_loading:
            return None

        self.transcript.add(text, "user")
        self.is_loading = True

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-API-KEY"] = self.api_key

        try:
            response = self.http.post(self.api_url, json={"message": text}, headers=headers)
            if response.is_success:
                return self.transcript.add(response.json()["response"], "bot")
            logger.error(f"Chat API error [{response.status_code}]: {response.text[:200]}")
            return self.transcript.add(REQUEST_ERROR_TEXT, "bot")
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error(f"Failed to send message: {e}")
            return self.transcript.add(CONNECTION_ERROR_TEXT, "bot")
        finally:
            self.is_loading = False


def run_console_chat(api_url: str = settings.CHAT_API_URL):
    client = ChatClient(api_url)
    print("Bot:", client.transcript.messages[0].text)
    print("(type /key <api key> to set an API key, /quit to leave)")

    while True:
        try:
            text = input("You: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if text.strip() == "/quit":
            break
        if text.startswith("/key "):
            reply = client.set_api_key(text[len("/key "):])
        else:
            reply = client.send(text)

        if reply is not None:
            print("Bot:", reply.text)
