import unicodedata

# Separator between the language variants of a bilingual station name ("Biel/Bienne")
NAME_VARIANT_SEPARATOR = "/"


def remove_accents(text: str) -> str:
    """Remove accents from text.

    Example: "Genève" -> "Geneve"
    """
    # Normalize to NFD (decomposes accented characters)
    normalized = unicodedata.normalize("NFD", text)
    # Remove combining diacritical marks
    return "".join(c for c in normalized if unicodedata.category(c) != "Mn")


def normalize_text(text: str) -> str:
    """Normalize text for station matching.

    - Removes accents
    - Converts to lowercase

    Whitespace is left alone so word boundaries survive for split_words().

    Example: "Zürich HB" -> "zurich hb"
    Example: "GENÈVE" -> "geneve"
    """
    return remove_accents(text).lower()


def split_words(text: str) -> list[str]:
    """Split normalized text into whitespace-delimited words.

    Example: "milano  centrale" -> ["milano", "centrale"]
    """
    return text.split()


def searchable_names(name: str) -> list[str]:
    """List every name a station can be found by.

    The full display name always comes first. Bilingual names written as
    "X/Y" also contribute each trimmed variant, left to right. Blank
    variants ("Basel/") are skipped.

    Examples:
        "Biel/Bienne" -> ["Biel/Bienne", "Biel", "Bienne"]
        "Milano Centrale" -> ["Milano Centrale"]
    """
    names = [name]
    if NAME_VARIANT_SEPARATOR in name:
        for variant in name.split(NAME_VARIANT_SEPARATOR):
            variant = variant.strip()
            if variant:
                names.append(variant)
    return names
