"""Shared utility functions for the testimonial analyzer."""

import math
import re

# Everything Streamlit's markdown treats specially, including ``$`` (math)
# and ``:`` (emoji shortcodes and color directives). ``&`` and ``;`` are
# left alone so HTML entities survive.
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()<>#+\-.!|~$:=])")


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences wrapping JSON from LLM responses."""
    text = text.strip()
    if text.startswith("```"):
        text = re.sub(r"^```\w*\n?", "", text)
        text = re.sub(r"\n?```$", "", text)
    return text.strip()


def escape_markdown(text: str) -> str:
    """Backslash-escape markdown syntax so ``st.markdown`` shows ``text`` as written."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def format_confidence(confidence: float) -> str:
    """Render a 0-1 confidence as an integer percentage, e.g. ``0.875 -> "88%"``.

    Rounds half up; ``round()`` would give banker's rounding.
    """
    # Rounding to 9 places first puts 0.285 * 100 == 28.499999999999996 back on the half.
    return f"{int(math.floor(round(confidence * 100, 9) + 0.5))}%"
