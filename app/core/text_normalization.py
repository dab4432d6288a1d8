"""
Text normalization for extracted project descriptions.
"""

MAX_DESCRIPTION_LENGTH = 500
TRUNCATION_MARKER = "..."


def normalize_description(text: str) -> str:
    """
    Trim a description and cap it at MAX_DESCRIPTION_LENGTH characters.

    Examples:
    - "  Built a thing. " → "Built a thing."
    - 600 x "a" → 500 x "a" + "..."
    """
    t = text.strip()
    if len(t) > MAX_DESCRIPTION_LENGTH:
        return t[:MAX_DESCRIPTION_LENGTH] + TRUNCATION_MARKER
    return t
