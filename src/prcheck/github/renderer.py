"""Markdown renderer for the incomplete-PR comment."""

from __future__ import annotations

from prcheck.messages import MessageKey
from prcheck.validator import MissingField

_MISSING_KEYS = {
    MissingField.MILESTONE: MessageKey.MILESTONE_MISSING,
    MissingField.ASSIGNEES: MessageKey.ASSIGNEES_MISSING,
    MissingField.LABELS: MessageKey.LABELS_MISSING,
}


def render_missing_fields_comment(
    missing_fields: list[MissingField],
    texts: dict[MessageKey, str],
) -> str:
    """Render the GitHub comment listing `missing_fields` in the language of `texts`."""
    sections: list[str] = []

    # Header
    sections.append(f"## ⚠️ {texts[MessageKey.TITLE]}")
    sections.append("")
    sections.append(texts[MessageKey.INTRO])
    sections.append("")
    for field in missing_fields:
        sections.append(texts[_MISSING_KEYS[field]])
    sections.append("")
    sections.append("---")
    sections.append("")

    # Why it matters
    sections.append(f"### 📝 {texts[MessageKey.IMPORTANCE]}")
    sections.append(f"- **Milestones** {texts[MessageKey.MILESTONE_IMPORTANCE]}")
    sections.append(f"- **Assignees** {texts[MessageKey.ASSIGNEES_IMPORTANCE]}")
    sections.append(f"- **Labels** {texts[MessageKey.LABELS_IMPORTANCE]}")
    sections.append("")

    # Remediation
    sections.append(f"### 🚀 {texts[MessageKey.HOW_TO_RESOLVE]}")
    sections.append(f"1. {texts[MessageKey.STEP1]}")
    sections.append(f"2. {texts[MessageKey.STEP2]}")
    sections.append(f"3. {texts[MessageKey.STEP3]}")
    sections.append("")

    sections.append(_footer(texts))
    return "\n".join(sections)


def _footer(texts: dict[MessageKey, str]) -> str:
    return f"---\n_{texts[MessageKey.FOOTER]}_\n"
