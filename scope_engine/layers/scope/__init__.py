"""Scope of work generation: prompts, normalization, mandatory items, refinement."""

from .scope_generator import ScopeGenerator
from .prompt_builder import ScopePromptBuilder
from .reference_context import build_reference_context
from .normalizer import (
    ScopeNormalizer,
    coerce_scope_item,
    round_to_multiple_of_5,
    strip_code_fences,
)
from .enforcement import (
    ensure_mandatory_items,
    is_project_management_item,
    is_testing_item,
)
from .renderer import render_scope_markdown, render_scope_html

__all__ = [
    "ScopeGenerator",
    "ScopePromptBuilder",
    "build_reference_context",
    "ScopeNormalizer",
    "coerce_scope_item",
    "round_to_multiple_of_5",
    "strip_code_fences",
    "ensure_mandatory_items",
    "is_project_management_item",
    "is_testing_item",
    "render_scope_markdown",
    "render_scope_html",
]
