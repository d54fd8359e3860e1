from collections.abc import Sequence

Rules = Sequence[tuple[str, str]]

# "US-  -SR" → "US-SR"
PLACE_OF_BIRTH_RULES: tuple[tuple[str, str], ...] = (
    ("  ", " "),
    ("--", "-"),
    (" -", "-"),
    ("- ", "-"),
)

ISSUED_BY_RULES: tuple[tuple[str, str], ...] = (
    ("  ", " "),
    ("..", "."),
    (",,", ","),
    ('""', '"'),
    ("''", "'"),
)


def apply_until_stable(text: str, rules: Rules) -> str:
    """Apply replacement rules until a full pass changes nothing.

    Every rule shortens the text, so the loop terminates.
    """
    changed = True
    while changed:
        changed = False
        for pattern, replacement in rules:
            replaced = text.replace(pattern, replacement)
            if replaced != text:
                text = replaced
                changed = True
    return text


def normalize_place_of_birth(place_of_birth: str) -> str:
    if not place_of_birth:
        return ""
    return apply_until_stable(place_of_birth, PLACE_OF_BIRTH_RULES)


def normalize_issued_by(issued_by: str) -> str:
    if not issued_by:
        return ""
    return apply_until_stable(issued_by, ISSUED_BY_RULES)
