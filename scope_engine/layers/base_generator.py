"""Base class for every generator that calls the completion service.

Common behavior:
- One injected ClaudeClient (process-wide singleton by default)
- Start/finish/failure logging with elapsed time per operation
- A single Claude call helper that returns raw text and propagates failures
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from scope_engine.config import Settings, get_settings
from scope_engine.services import ClaudeClient, get_claude_client

logger = logging.getLogger(__name__)


class BaseGenerator:
    """
    Generator base class.

    Subclasses set _generator_name for log prefixes and implement their
    operations on top of _operation() and _call_claude().

    Attributes:
        claude_client: Client for the completion service
        settings: Application settings (token limits, temperatures)
        _generator_name: Name used in log prefixes
    """

    _generator_name: str = "BaseGenerator"

    def __init__(
        self,
        claude_client: Optional[ClaudeClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            claude_client: Claude client instance. Uses the singleton when None.
            settings: Settings instance. Uses get_settings() when None.
        """
        self.claude_client = claude_client or get_claude_client()
        self.settings = settings or get_settings()

    @asynccontextmanager
    async def _operation(self, name: str):
        """Log start, completion and failure of one operation with its elapsed time."""
        log_prefix = f"[{self._generator_name}:{name}]"
        logger.info(f"{log_prefix} started")
        start_time = datetime.now()

        try:
            yield
        except Exception as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(f"{log_prefix} failed ({elapsed:.1f}s): {type(e).__name__}: {e}")
            raise

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"{log_prefix} finished: {elapsed:.1f}s")

    async def _call_claude(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
        section_name: str = "",
    ) -> str:
        """
        Call Claude once and return the raw response text.

        Failures are not swallowed: a transport error propagates to the
        caller unchanged.

        Args:
            system_prompt: System prompt
            user_prompt: User prompt
            max_tokens: Maximum output tokens
            temperature: Sampling temperature
            section_name: Log label

        Returns:
            Raw response text ("" when the response carried no text)
        """
        log_prefix = f"[{self._generator_name}]"
        if section_name:
            log_prefix = f"[{self._generator_name}:{section_name}]"

        result = await self.claude_client.complete(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        text = result.text
        logger.debug(f"{log_prefix} Claude response: {len(text)} chars")
        return text
