"""
Chat completion client for Shelly.

This module sends a single user message to an OpenAI-compatible chat
completions endpoint and returns the text of the first choice. There is
exactly one request per call: no streaming and no retries.
"""

import logging
from typing import List, Literal, Optional

import httpx
from pydantic import BaseModel, ValidationError

from .. import USER_AGENT
from ..config.settings import ShellySettings
from ..config.store import Config
from .errors import (
    ApiStatusError,
    EmptyReplyError,
    RequestBuildError,
    ResponseMalformedError,
    TransportError,
)

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    """OpenAI-compatible message format."""
    role: Literal["user"] = "user"
    content: str


class ChatRequest(BaseModel):
    """OpenAI-compatible request format."""
    model: str
    messages: List[ChatMessage]


class ChatReply(BaseModel):
    """OpenAI-compatible reply message format."""
    content: Optional[str] = None


class ChatChoice(BaseModel):
    """OpenAI-compatible choice format."""
    message: ChatReply


class ChatResponse(BaseModel):
    """OpenAI-compatible response format."""
    choices: List[ChatChoice]


class ChatClient:
    """Synchronous client for a chat completions endpoint."""

    def __init__(
        self,
        settings: ShellySettings,
        config: Config,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self._client = httpx.Client(
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.api_key}",
                "User-Agent": USER_AGENT,
            },
            timeout=httpx.Timeout(settings.timeout),
            transport=transport,
        )

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def build_request(self, prompt: str) -> httpx.Request:
        """Build the POST request carrying a single user message."""
        payload = ChatRequest(
            model=self.settings.model,
            messages=[ChatMessage(content=prompt)],
        )
        try:
            return self._client.build_request(
                "POST",
                self.settings.api_url,
                content=payload.model_dump_json(),
            )
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            raise RequestBuildError(original_error=e) from e

    def send(self, prompt: str) -> str:
        """Send a prompt and return the reply text.

        Args:
            prompt: Fully rendered prompt

        Returns:
            Content of the first choice

        Raises:
            RequestBuildError: The request could not be built
            TransportError: No HTTP response was received
            ApiStatusError: The endpoint returned a non-2xx status
            ResponseMalformedError: The body is not a chat completion
            EmptyReplyError: The response has no choices
        """
        request = self.build_request(prompt)
        logger.debug(f"POST {request.url} (model {self.settings.model})")

        try:
            response = self._client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(original_error=e) from e

        logger.debug(f"Received status {response.status_code}")
        if not response.is_success:
            raise ApiStatusError(response.status_code, response.text)

        try:
            parsed = ChatResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseMalformedError(original_error=e) from e

        if not parsed.choices:
            raise EmptyReplyError()

        return parsed.choices[0].message.content or ""


def create_chat_client(settings: ShellySettings, config: Config) -> ChatClient:
    """Create the chat client used by the CLI."""
    return ChatClient(settings, config)
