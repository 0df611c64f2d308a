"""Ingested document to structured HTML proposal conversion."""

import logging

from scope_engine.exceptions import ClaudeClientError, GenerationError, InputValidationError
from scope_engine.models import ConvertedProposal, ExtractedProposalMetadata

from ..base_generator import BaseGenerator
from ..scope.normalizer import parse_json_object
from .metadata_extractor import metadata_from_dict
from .prompts import (
    CONVERT_DOCUMENT_SYSTEM_PROMPT,
    CONVERT_HTML_USER_PROMPT,
    CONVERT_TEXT_USER_PROMPT,
)

logger = logging.getLogger(__name__)

CONVERT_FAILURE_MESSAGE = "Failed to convert document. Please try again."


class DocumentProposalConverter(BaseGenerator):
    """
    Restructures document text (or HTML) into an editor-ready proposal.

    One call returns both the proposal HTML and any metadata found in the
    document. Unlike metadata extraction, failure here is fatal: the caller
    has nothing to show without the converted content.
    """

    _generator_name = "DocumentProposalConverter"

    async def convert(self, content: str, is_html: bool = False) -> ConvertedProposal:
        """
        Args:
            content: Extracted document text, or HTML when is_html is set
            is_html: Source is already HTML and only needs restructuring

        Returns:
            ConvertedProposal with html_content ("" when the model sent none)

        Raises:
            InputValidationError: blank content
            GenerationError: service failure or a response that is not a JSON object
        """
        if not content or not content.strip():
            raise InputValidationError("Document content is required")

        template = CONVERT_HTML_USER_PROMPT if is_html else CONVERT_TEXT_USER_PROMPT
        logger.info(
            f"[{self._generator_name}] converting {len(content)} chars (html={is_html})"
        )

        try:
            async with self._operation("convert"):
                raw_text = await self._call_claude(
                    CONVERT_DOCUMENT_SYSTEM_PROMPT,
                    template.format(content=content),
                    max_tokens=self.settings.conversion_max_tokens,
                    temperature=self.settings.conversion_temperature,
                    section_name="convert",
                )
        except ClaudeClientError as e:
            raise GenerationError(
                CONVERT_FAILURE_MESSAGE,
                details={"error_code": e.error_code},
            ) from e

        data = parse_json_object(raw_text)
        if data is None:
            logger.error(f"[{self._generator_name}] response is not a JSON object")
            logger.error(f"[{self._generator_name}] raw response: {raw_text!r}")
            raise GenerationError(CONVERT_FAILURE_MESSAGE, details={"reason": "unparseable_response"})

        metadata = data.get("metadata")
        result = ConvertedProposal(
            html_content=str(data.get("htmlContent") or ""),
            metadata=metadata_from_dict(metadata) if isinstance(metadata, dict) else ExtractedProposalMetadata(),
        )
        logger.info(
            f"[{self._generator_name}] converted: {len(result.html_content)} chars of HTML, "
            f"title={result.metadata.title!r}"
        )
        return result
