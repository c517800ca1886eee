"""Display names for the language codes used as sheet headers."""

LANGUAGE_NAMES = {
    "EN": "English",
    "PT": "Portuguese (Portugal)",
    "PT-BR": "Portuguese (Brazil)",
    "ZH-CN": "Chinese (Simplified)",
    "ZH-TW": "Chinese (Traditional)",
    "FR": "French",
    "DE": "German",
    "RU": "Russian",
    "ES-EU": "Spanish (Spain)",
    "ES-LA": "Spanish (Latin-America)",
    "JP": "Japanese",
    "KR": "Korean",
    "TK": "Turkish",
    "IT": "Italian",
}


def code_to_language_name(code: str) -> str:
    """Return the display name for a language code, or the code itself if unknown."""
    return LANGUAGE_NAMES.get(code.upper(), code)
