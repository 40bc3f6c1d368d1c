"""
Content guidelines for generated Project Folders.
Defines the studio voice, the tone presets offered in the UI, the model
choices and the mandatory section outline.
"""

GUIDELINES = {
    "roles": {
        "developer": "The studio (the user's agency)",
        "client": "The person or company described in the pasted lead block",
        "user": "The internal operator pasting the lead",
    },
    "brand_voice": {
        "tone": ["modern", "premium", "clean", "friendly but professional", "confident without hype"],
        "avoid": ["corporate jargon", "AI tone", "filler", "placeholders", "repeated content"],
        "copywriting": [
            "Short, direct sentences",
            "Clear, bold section headers",
            "Smooth reading rhythm",
            "UX-oriented microcopy",
        ],
    },
    "engineering_defaults": {
        "stack": [
            "Next.js + React",
            "Tailwind CSS",
            "Node.js / API routes",
            "Supabase or PlanetScale",
            "Vercel deployment",
            "OpenAI API",
            "Zapier / Make automations",
            "Notion / HubSpot CRM (if relevant)",
        ],
        "practices": [
            "Modular component architecture",
            "Scalable data models",
            "Role-based access",
            "Fast, responsive UX",
            "Realistic engineering constraints",
        ],
    },
    "design_language": [
        "Clean, minimal layouts",
        "Soft shadows and modern depth",
        "Calm gradients or solid neutrals",
        "8px spacing system",
        "Rounded containers",
        "Responsive-first layouts",
    ],
}

# Order matters: the section splitter in the UI relies on these headings.
PROJECT_FOLDER_SECTIONS = [
    ("Project Overview", "High-level summary, vision, context."),
    ("Final Project Brief", "Objectives, pains, outcomes, deliverables, risks."),
    ("Proposal", "Scope, process, timeline, investment tiers, next steps."),
    ("Mini-Spec (Technical Specification)", "Pages, components, architecture, data models, roles, integrations."),
    ("Wireframes / Prototype (Text-Based)", "Flows, diagrams, screen descriptions."),
    ("Site Structure / Pages & Components", "Sitemap + component lists."),
    ("Integrations & Automations", "AI, APIs, triggers, workflows, optional phase 2."),
    ("Assets", "What the client provides vs. what the studio creates."),
    ("QA & Launch", "Checklist + launch plan."),
    ("Final Delivery", "What the client receives (code, design, docs, etc.)."),
    ("Post-Launch Support", "Support window + maintenance options + roadmap."),
]

MODEL_OPTIONS = {
    "gpt-4.1-mini": "GPT-4.1 mini (fast, cheap)",
    "gpt-4.1": "GPT-4.1 (higher quality)",
}

TONE_PRESETS = {
    "premium": {
        "label": "Premium agency (default)",
        "instruction": "Confident, polished agency voice. Premium but never salesy.",
    },
    "professional": {
        "label": "Professional & neutral",
        "instruction": "Neutral, precise, businesslike. No flourishes.",
    },
    "friendly": {
        "label": "Friendly & approachable",
        "instruction": "Warm and approachable, plain words, still structured.",
    },
    "concise": {
        "label": "Ultra concise",
        "instruction": "As short as possible. Bullets over paragraphs, no repetition.",
    },
}


def get_style_instructions() -> str:
    """Return consolidated style instructions for the system prompt."""
    voice = GUIDELINES["brand_voice"]
    eng = GUIDELINES["engineering_defaults"]
    lines = [
        "STYLE GUIDE (Studio Project Folders):",
        "",
        "VOICE & TONE:",
        *[f"- {t.capitalize()}" for t in voice["tone"]],
        "",
        "NEVER USE:",
        *[f"- {a.capitalize()}" for a in voice["avoid"]],
        "",
        "COPYWRITING:",
        *[f"- {c}" for c in voice["copywriting"]],
        "",
        "DEFAULT TECH STACK:",
        *[f"- {s}" for s in eng["stack"]],
        "",
        "ENGINEERING PRACTICES:",
        *[f"- {p}" for p in eng["practices"]],
        "",
        "DESIGN LANGUAGE (all UI descriptions):",
        *[f"- {d}" for d in GUIDELINES["design_language"]],
    ]
    return "\n".join(lines)


def get_tone_instruction(tone: str) -> str:
    preset = TONE_PRESETS.get(tone) or TONE_PRESETS["premium"]
    return preset["instruction"]


def get_section_outline() -> str:
    """The mandatory '## N. Title' outline, one heading per section."""
    return "\n\n".join(
        f"## {i}. {title}\n{desc}" for i, (title, desc) in enumerate(PROJECT_FOLDER_SECTIONS, start=1)
    )
