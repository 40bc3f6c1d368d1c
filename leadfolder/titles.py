# leadfolder/titles.py
UNTITLED = "Untitled lead"
_NAME_PREFIX = "lead name:"


def derive_title(lead_text: str) -> str:
    """Short label for the history list: the 'Lead Name:' value or the first line."""
    lines = [ln.strip() for ln in (lead_text or "").split("\n") if ln.strip()]
    if not lines:
        return UNTITLED

    name_line = next((ln for ln in lines if ln.lower().startswith(_NAME_PREFIX)), None)
    if name_line is not None:
        return name_line[len(_NAME_PREFIX):].strip() or UNTITLED

    return lines[0]
