"""Scope document rendering tests (Markdown / HTML)."""

from scope_engine.layers.scope.renderer import (
    group_by_workstream,
    render_scope_html,
    render_scope_markdown,
)
from scope_engine.models import ScopeItem


class TestGroupByWorkstream:
    def test_groups_follow_sorted_order(self, compliant_items):
        shuffled = list(reversed(compliant_items))
        groups = group_by_workstream(shuffled)
        assert list(groups) == ["Frontend", "Backend", "Project Management", "Testing & QA"]
        assert [item.story_id for item in groups["Frontend"]] == ["FEAT-001", "FEAT-002"]


class TestMarkdown:
    def test_summary_and_sections(self, compliant_items):
        markdown = render_scope_markdown(compliant_items, title="Acme Portal")
        assert markdown.startswith("# Acme Portal\n")
        assert "**Total Items**: 5" in markdown
        assert "**Estimated Hours**: 125h" in markdown
        assert "## Frontend (2 items, 60h)" in markdown
        assert "### FEAT-001 · 20 hours" in markdown
        assert "**Customer Story**: Acme Corp wants a secure login page" in markdown

    def test_empty_list(self):
        markdown = render_scope_markdown([])
        assert markdown == "# Scope of Work\n\n_No scope items provided._"

    def test_bullets_are_kept(self):
        item = ScopeItem(story_id="A", recommended_approach="• One\n• Two")
        assert "• One\n• Two" in render_scope_markdown([item])


class TestHtml:
    def test_document_structure(self, compliant_items):
        html = render_scope_html(compliant_items, title="Acme Portal")
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Acme Portal</title>" in html
        assert "<strong>Estimated Hours:</strong> 125h" in html
        assert '<span class="story-id">TEST-001</span>' in html
        assert html.rstrip().endswith("</html>")

    def test_text_is_escaped(self):
        item = ScopeItem(
            story_id="<b>X</b>",
            workstream="R&D",
            customer_story='Acme wants <script>alert("x")</script>',
        )
        html = render_scope_html([item], title="A < B")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "R&amp;D" in html
        assert "<title>A &lt; B</title>" in html

    def test_newlines_become_line_breaks(self):
        item = ScopeItem(story_id="A", assumptions="• One\n• Two")
        assert "• One<br />\n• Two" in render_scope_html([item])

    def test_empty_list(self):
        assert "<p>No scope items provided.</p>" in render_scope_html([])
