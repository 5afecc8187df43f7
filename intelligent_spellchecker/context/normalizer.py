# intelligent_spellchecker/context/normalizer.py


def normalize_word(word: str, lowercase: bool = True) -> str:
    """Apply the run's case policy to a core word (punctuation already stripped)."""
    if not word:
        return ""
    word = word.strip()
    return word.lower() if lowercase else word


def match_case(original: str, replacement: str) -> str:
    """
    Carry the capitalisation of `original` onto `replacement`:
    ALL CAPS stays all caps, Capitalised stays capitalised, anything else is left alone.
    """
    if not original or not replacement:
        return replacement
    if len(original) > 1 and original.isupper():
        return replacement.upper()
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement
