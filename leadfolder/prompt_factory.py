# leadfolder/prompt_factory.py
from __future__ import annotations

from leadfolder.content_guidelines import (
    GUIDELINES,
    get_section_outline,
    get_style_instructions,
    get_tone_instruction,
)
from leadfolder.models import PromptSect

DEFAULT_TONE = "premium"

PIPELINE_STEPS = """THE PIPELINE (run it silently for every lead):

STEP 1 - IDENTIFY: client name, email, budget, timeline, notes, project type.
If a field is missing, infer it logically. Never block output.

STEP 2 - PARSE: extract everything relevant, even from half sentences, mixed
languages, emojis, transcribed screenshots, chat logs or voice-to-text.

STEP 3 - STRUCTURE: normalize into Client / Email / Project Type / Budget /
Timeline / Notes.

STEP 4 - GENERATE: build the entire Project Folder using the mandatory outline."""


def _roles_block() -> str:
    roles = GUIDELINES["roles"]
    return "\n".join(f"- The {k} = {v}" for k, v in roles.items())


def build_system_prompt() -> str:
    """Fixed instruction template sent as the system message on every request."""
    return (
        "You are a senior full-stack engineering and product studio that turns raw lead data "
        "into complete, agency-grade deliverables.\n\n"
        "ROLES (never confuse them):\n"
        f"{_roles_block()}\n\n"
        "MISSION: for every pasted lead, produce a fully structured Project Folder. "
        "Never skip sections unless the operator explicitly asks for only one.\n\n"
        "When the idea is vague, expand it into a coherent product vision grounded in market logic, "
        "user experience and technical feasibility. Highlight 3-5 strengths that set the product apart. "
        "State MVP boundaries, inclusions, exclusions and technical assumptions to prevent scope creep. "
        "If the lead has no project name, invent a short, modern internal name. "
        "In the wireframes section, use text-based flow diagrams with arrows and indentation.\n\n"
        f"{get_style_instructions()}\n\n"
        f"{PIPELINE_STEPS}\n\n"
        "MANDATORY OUTPUT STRUCTURE (STRICT) - use exactly these H2 headings, in this order:\n\n"
        f"{get_section_outline()}\n\n"
        "Never repeat the raw lead data. Never mention AI, prompts or instructions."
    )


def make_project_folder_prompt(lead_text: str, tone: str | None = None, temperature: float = 0.4) -> PromptSect:
    """Build the system+user pair for one Project Folder generation."""
    tone = tone or DEFAULT_TONE
    rules = [
        "Output 100% of the Project Folder.",
        "Use the exact '## N. Title' headings from the outline.",
        "Infer missing data; never use placeholders.",
    ]
    rules_md = "\n".join(f"- {r}" for r in rules)
    user = (
        "Here is the raw lead data. Generate the full Project Folder based on it.\n"
        f"Tone preset: {tone}. {get_tone_instruction(tone)}\n\n"
        f"RULES:\n{rules_md}\n\n"
        f"{lead_text}"
    )
    return PromptSect(system=build_system_prompt(), user=user, rules=rules, temperature=temperature)
