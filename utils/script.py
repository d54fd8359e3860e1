import regex

_CYRILLIC_CHAR = regex.compile(r"\p{Script=Cyrillic}")

# Латинские I и V встречаются в римских цифрах ("Иванов II", "Д'Артаньян(V)")
ALLOWED_NAME_PUNCTUATION = frozenset({"-", " ", ".", ",", "I", "V", "'", "(", ")"})


def is_cyrillic(char: str) -> bool:
    return _CYRILLIC_CHAR.fullmatch(char) is not None


def is_allowed_name_char(char: str) -> bool:
    return char in ALLOWED_NAME_PUNCTUATION or is_cyrillic(char)


def find_disallowed_char(text: str) -> int | None:
    """Index of the first character outside Cyrillic + allowed punctuation."""
    for index, char in enumerate(text):
        if not is_allowed_name_char(char):
            return index
    return None


def has_only_allowed_chars(text: str) -> bool:
    return find_disallowed_char(text) is None
