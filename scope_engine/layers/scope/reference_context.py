"""Reference-example context built from prior successful scope documents."""

from scope_engine.models import KnowledgeBaseDocument

from .prompts import REFERENCE_EXAMPLES_HEADER, SECTION_DIVIDER


def build_reference_context(documents: list[KnowledgeBaseDocument]) -> str:
    """
    Render reference documents into few-shot prompt text.

    Documents are rendered verbatim in input order. Nothing is filtered,
    ranked or truncated here; callers bound how many documents they pass.

    Returns:
        "" for an empty list, otherwise the header followed by one block per
        document, each closed by a divider.
    """
    if not documents:
        return ""

    blocks = [REFERENCE_EXAMPLES_HEADER]
    for index, doc in enumerate(documents, 1):
        lines = [
            f"Example {index}: {doc.title}",
            f"Company: {doc.company_name}",
        ]
        if doc.project_type:
            lines.append(f"Project Type: {doc.project_type}")
        lines.append(f"Content:\n{doc.body}")
        lines.append("")
        lines.append(SECTION_DIVIDER)
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks) + "\n"
