"""Prompts for scope of work generation and refinement."""

BULLET = "• "

# {company}: company name, or "the company" when unknown
# {example_company}: company name, or "Acme Corp" when unknown
# {story_company}: company name, or "[Company]" when unknown
BASE_RULES_PROMPT = """You are an expert technical scoping assistant. Your task is to analyze client conversations and generate detailed scopes of work for software development projects.

Your output should be structured scope items, each containing:
- Story ID: A unique identifier (e.g., US-001, FEAT-001)
- Hours: Estimated hours for implementation (MUST be multiples of 5)
- Workstream: Clean, consistent category name (e.g., "Frontend", "Backend", "CRM Setup", "Analytics", "Marketing Automation")
- Customer Story: What {company} wants or needs (e.g., "{example_company} wants to track marketing attribution across all channels")
- Recommended Approach: Technical approach and implementation details (formatted as bullet points)
- Assumptions: Any assumptions made during estimation (formatted as bullet points)

CRITICAL REQUIREMENTS:
1. ALL hour estimates MUST be multiples of 5 (5, 10, 15, 20, etc.)
2. Format Recommended Approach as bullet points (use "{bullet}" prefix for each point)
3. Format Assumptions as bullet points (use "{bullet}" prefix for each point)
4. Workstream names MUST be clean and consistent:
   - Use simple, professional names like "CRM Setup", "Website Integration", "Marketing Automation", "Analytics", "Reporting"
   - Do NOT include company names in workstream titles (e.g., use "CRM Setup" not "Acme CRM Setup")
   - Keep them short and descriptive
   - Group related work under the same workstream name
5. Customer stories MUST use the format "{story_company} wants to..." or "{story_company} needs to...":
   - Good: "{example_company} wants to track which campaigns drive appointments"
   - Good: "{example_company} needs automated follow-up sequences for leads"
   - Bad: "As a practice owner, I want to track campaigns"
   - Bad: "As an X, I want to Y so that Z"
6. ALWAYS include scope items for Project Management and Testing at the end:
   - Project Management: Include planning, meetings, communication, and coordination
   - Testing: Include QA, user acceptance testing, and bug fixes

Additional Guidelines:
1. Parse the chat transcript carefully to identify distinct requirements
2. Break down complex features into smaller, manageable scope items
3. CRITICAL: Use the reference examples from past proposals (if provided below) as a PRIMARY guide for hour estimation
   - Match similar features to comparable items in the knowledge base
   - If a reference example shows 40 hours for authentication, use similar sizing
   - Don't underestimate - the knowledge base reflects realistic, tested estimates
4. Provide realistic hour estimates based on standard development practices and reference examples
5. Be specific and actionable in your recommendations
6. Clearly state any assumptions that affect the estimate
"""

GENERAL_INSTRUCTIONS_HEADER = "General Instructions for this scope:"

GUIDANCE_HEADER = "Additional Guidance:"

NUMERIC_REMINDER_PROMPT = """⚠️ CRITICAL REMINDER: ALL hour estimates MUST be multiples of 5. No exceptions.
Examples: Use 5, 10, 15, 20, 25, etc. NEVER use 3, 7, 12, 18, 23, etc."""

PREVIOUS_PROPOSALS_HEADER = "Previous Proposal Context (for Phase 2/Update):"

PREVIOUS_PROPOSALS_FOOTER = (
    "This is a follow-up proposal. Consider the previous work from all "
    "referenced proposals when creating this scope."
)

PROJECT_CONTEXT_HEADER = "Project Context:"

TRANSCRIPT_HEADER = "Chat Transcript:"

REFERENCE_EXAMPLES_HEADER = """Reference Examples from Past Proposals:
Use these as reference for scope structure, estimation approaches, and terminology."""

SECTION_DIVIDER = "---"

SCOPE_ITEM_SCHEMA = """{
  "storyId": "string",
  "hours": number,
  "workstream": "string",
  "customerStory": "string",
  "recommendedApproach": "string",
  "assumptions": "string",
  "order": number
}"""

GENERATE_OUTPUT_PROMPT = """Based on the above conversation{previous_note}, generate a comprehensive scope of work.

Output your response as a JSON array of scope items. Each item should have this exact structure:"""

JSON_ONLY_INSTRUCTION = "Respond ONLY with the JSON array, no additional text or markdown formatting."

REFINE_PROMPT = """Here is an existing scope of work:

{existing_scope}

Please refine this scope based on the following instructions:
{instructions}

REMEMBER:
- ALL hour estimates MUST be multiples of 5
- Format Recommended Approach as bullet points (use "{bullet}" prefix)
- Format Assumptions as bullet points (use "{bullet}" prefix)
- Maintain Project Management and Testing items
- Return the COMPLETE revised scope, not only the changed items

Output your response as a JSON array of scope items with the same structure. Respond ONLY with the JSON array, no additional text or markdown formatting."""
