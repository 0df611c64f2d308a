"""Claude client service for scope generation.

Wraps the Anthropic Messages API behind a single long-lived async client.

Main entry point:
- complete(): send (system prompt, user prompt) and return the raw text

Behavior:
- One AsyncAnthropic instance per process, built from Settings
- No retries (max_retries=0); retry policy belongs to the caller's transport
- No parsing; callers interpret the returned text
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Any

import anthropic

from scope_engine.config import get_settings
from scope_engine.exceptions import ClaudeClientError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionResult:
    """Raw completion text plus usage metadata."""
    text: str
    model: str = ""
    stop_reason: Optional[str] = None
    input_tokens: int = 0
    output_tokens: int = 0


class ClaudeClient:
    """
    Async Claude Messages API wrapper.

    Attributes:
        model: Default model identifier for every call
        _client: Underlying AsyncAnthropic instance
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[Any] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Anthropic API key. Falls back to settings, then to the
                     ANTHROPIC_API_KEY environment variable read by the SDK.
            model: Default model. Falls back to settings.claude_model.
            client: Pre-built AsyncAnthropic-compatible client (tests).
        """
        settings = get_settings()
        self.model = model or settings.claude_model
        self._client = client or anthropic.AsyncAnthropic(
            api_key=api_key or settings.anthropic_api_key or None,
            max_retries=0,
        )

        logger.info(f"[Claude] client initialized (model={self.model})")

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int = 4096,
        temperature: float = 0.3,
        model: Optional[str] = None,
    ) -> CompletionResult:
        """
        Send a completion request to Claude.

        Args:
            system_prompt: System-level instructions
            user_prompt: User message content
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature (low for extraction, higher for prose)
            model: Model override for this call

        Returns:
            CompletionResult whose text is the first text block of the
            response, or "" when the response carries no text.

        Raises:
            ClaudeClientError: network or service failure
        """
        model = model or self.model
        logger.info(
            f"[Claude] request: model={model}, prompt={len(system_prompt) + len(user_prompt)} chars, "
            f"max_tokens={max_tokens}, temperature={temperature}"
        )
        start_time = datetime.now()

        try:
            message = await self._client.messages.create(
                model=model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system_prompt,
                messages=[
                    {"role": "user", "content": user_prompt},
                ],
            )
        except anthropic.APIError as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(f"[Claude] request failed after {elapsed:.1f}s: {type(e).__name__}: {e}")
            raise ClaudeClientError(
                "Completion service request failed",
                details={"error_type": type(e).__name__},
            ) from e

        elapsed = (datetime.now() - start_time).total_seconds()
        usage = getattr(message, "usage", None)
        result = CompletionResult(
            text=self._first_text(getattr(message, "content", None) or []),
            model=getattr(message, "model", model) or model,
            stop_reason=getattr(message, "stop_reason", None),
            input_tokens=getattr(usage, "input_tokens", 0) or 0,
            output_tokens=getattr(usage, "output_tokens", 0) or 0,
        )

        logger.info(
            f"[Claude] done: {elapsed:.1f}s, stop_reason={result.stop_reason}, "
            f"tokens in/out={result.input_tokens}/{result.output_tokens}, response={len(result.text)} chars"
        )
        return result

    @staticmethod
    def _first_text(blocks: list) -> str:
        """Text of the first text-bearing content block, or ""."""
        for block in blocks:
            if getattr(block, "type", None) == "text":
                return getattr(block, "text", "") or ""
        return ""


# Singleton instance for dependency injection
_claude_client: Optional[ClaudeClient] = None


def get_claude_client() -> ClaudeClient:
    """Get or create Claude client singleton."""
    global _claude_client
    if _claude_client is None:
        _claude_client = ClaudeClient()
    return _claude_client
