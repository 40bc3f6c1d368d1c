# leadfolder/sections.py
"""
Split a generated Project Folder into the named views shown as tabs.

The generator is asked for H2 headings like ``## 1. Project Overview``. Only
those numbered H2 headings delimit spans; everything else is body text.
"""
from __future__ import annotations

import re
from typing import Dict

SECTION_KEYS = ("all", "overview", "brief", "proposal", "mini_spec")

SECTION_LABELS = {
    "all": "All",
    "overview": "Overview",
    "brief": "Brief",
    "proposal": "Proposal",
    "mini_spec": "Mini-spec",
}

HEADING_RE = re.compile(r"^##\s*\d+\.\s*([^\n]+)\s*$", re.M)


def _bucket_for(title: str) -> str | None:
    t = title.lower()
    if "project overview" in t:
        return "overview"
    if "final project brief" in t:
        return "brief"
    if "proposal" in t:
        return "proposal"
    if "mini-spec" in t or "mini spec" in t:
        return "mini_spec"
    return None


def segment_sections(markdown: str) -> Dict[str, str]:
    """
    Return {all, overview, brief, proposal, mini_spec} for a Markdown document.

    ``all`` is always the input verbatim. Each heading's span runs to the next
    numbered heading (or end of text) and is stripped. When two headings map to
    the same bucket the later one wins. Unmatched spans are dropped.
    """
    sections = {key: "" for key in SECTION_KEYS}
    sections["all"] = markdown
    if not markdown:
        return sections

    matches = list(HEADING_RE.finditer(markdown))
    for idx, m in enumerate(matches):
        start = m.start()
        end = matches[idx + 1].start() if idx + 1 < len(matches) else len(markdown)
        bucket = _bucket_for(m.group(1))
        if bucket is None:
            continue
        sections[bucket] = markdown[start:end].strip()
    return sections
