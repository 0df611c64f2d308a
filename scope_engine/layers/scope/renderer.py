"""Scope of work document rendering (Markdown and HTML)."""

from html import escape

from scope_engine.models import ScopeItem, sort_scope_items, total_hours


def group_by_workstream(items: list[ScopeItem]) -> dict[str, list[ScopeItem]]:
    """Sorted items grouped by workstream, groups in first-appearance order."""
    groups: dict[str, list[ScopeItem]] = {}
    for item in sort_scope_items(items):
        groups.setdefault(item.workstream or "General", []).append(item)
    return groups


def render_scope_markdown(items: list[ScopeItem], title: str = "Scope of Work") -> str:
    """Markdown scope document."""
    lines = [f"# {title}", ""]

    if not items:
        lines.append("_No scope items provided._")
        return "\n".join(lines)

    lines.append(f"**Total Items**: {len(items)}")
    lines.append(f"**Estimated Hours**: {total_hours(items)}h")
    lines.append("")
    lines.append("---")
    lines.append("")

    for workstream, group in group_by_workstream(items).items():
        lines.append(f"## {workstream} ({len(group)} items, {total_hours(group)}h)")
        lines.append("")

        for item in group:
            lines.append(f"### {item.story_id} · {item.hours} hours")
            lines.append("")
            if item.customer_story:
                lines.append(f"**Customer Story**: {item.customer_story}")
                lines.append("")
            if item.recommended_approach:
                lines.append("**Recommended Approach**")
                lines.append("")
                lines.append(item.recommended_approach)
                lines.append("")
            if item.assumptions:
                lines.append("**Assumptions**")
                lines.append("")
                lines.append(item.assumptions)
                lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _html_text(text: str) -> str:
    return escape(text).replace("\n", "<br />\n")


def render_scope_html(items: list[ScopeItem], title: str = "Scope of Work") -> str:
    """Standalone HTML scope document. All item text is escaped."""
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '    <meta charset="UTF-8">',
        f"    <title>{escape(title)}</title>",
        "    <style>",
        "        body { font-family: -apple-system, 'Segoe UI', Roboto, Arial, sans-serif; "
        "max-width: 1000px; margin: 0 auto; padding: 40px 20px; color: #333; }",
        "        h1 { border-bottom: 3px solid #2563eb; padding-bottom: 0.3em; }",
        "        h2 { border-left: 4px solid #2563eb; padding-left: 12px; }",
        "        .scope-item { border-left: 4px solid #3b82f6; padding: 12px 20px; margin-bottom: 16px; }",
        "        .story-id { font-family: monospace; font-weight: 700; }",
        "        .hours-badge { float: right; font-weight: 600; color: #2563eb; }",
        "        .section-title { font-weight: 600; color: #6b7280; margin-top: 8px; }",
        "    </style>",
        "</head>",
        "<body>",
        f"<h1>{escape(title)}</h1>",
    ]

    if not items:
        parts.append("<p>No scope items provided.</p>")
    else:
        parts.append(
            f'<p class="summary"><strong>Total Items:</strong> {len(items)} | '
            f"<strong>Estimated Hours:</strong> {total_hours(items)}h</p>"
        )

        for workstream, group in group_by_workstream(items).items():
            parts.append('<div class="workstream-group">')
            parts.append(
                f"<h2>{escape(workstream)} <small>({len(group)} items, {total_hours(group)}h)</small></h2>"
            )
            for item in group:
                parts.append('<div class="scope-item">')
                parts.append(
                    f'<span class="story-id">{escape(item.story_id)}</span>'
                    f'<span class="hours-badge">{item.hours} hours</span>'
                )
                for label, text in (
                    ("Customer Story", item.customer_story),
                    ("Recommended Approach", item.recommended_approach),
                    ("Assumptions", item.assumptions),
                ):
                    parts.append(f'<div class="section-title">{label}</div>')
                    parts.append(f"<div>{_html_text(text)}</div>")
                parts.append("</div>")
            parts.append("</div>")

    parts.append("</body>")
    parts.append("</html>")
    return "\n".join(parts)
