"""Proposal metadata extraction from a client conversation."""

import logging

from scope_engine.models import ExtractedProposalMetadata

from ..base_generator import BaseGenerator
from ..scope.normalizer import parse_json_object
from .prompts import METADATA_SYSTEM_PROMPT, METADATA_USER_PROMPT

logger = logging.getLogger(__name__)

METADATA_FIELDS = {
    "title": "title",
    "companyName": "company_name",
    "contactName": "contact_name",
    "contactEmail": "contact_email",
    "engagementTimeline": "engagement_timeline",
}


def metadata_from_dict(data: dict) -> ExtractedProposalMetadata:
    """Map camelCase response keys onto metadata; empty strings and nulls mean "not found"."""
    values = {}
    for key, attr in METADATA_FIELDS.items():
        value = data.get(key)
        if value:
            values[attr] = str(value).strip()
    return ExtractedProposalMetadata(**values)


class MetadataExtractor(BaseGenerator):
    """
    Extracts proposal header fields (title, company, contact, timeline).

    Extraction is best effort: any failure is logged and an empty
    metadata object is returned so proposal creation can continue.
    """

    _generator_name = "MetadataExtractor"

    async def extract(self, chat_transcript: str) -> ExtractedProposalMetadata:
        try:
            async with self._operation("extract"):
                raw_text = await self._call_claude(
                    METADATA_SYSTEM_PROMPT,
                    METADATA_USER_PROMPT.format(transcript=chat_transcript),
                    max_tokens=self.settings.metadata_max_tokens,
                    temperature=self.settings.metadata_temperature,
                    section_name="extract",
                )
        except Exception as e:
            logger.warning(f"[{self._generator_name}] extraction call failed: {e}")
            return ExtractedProposalMetadata()

        data = parse_json_object(raw_text)
        if data is None:
            logger.warning(f"[{self._generator_name}] response is not a JSON object")
            logger.debug(f"[{self._generator_name}] raw response: {raw_text!r}")
            return ExtractedProposalMetadata()

        return metadata_from_dict(data)
