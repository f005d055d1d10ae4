# ABOUTME: Language tags accepted for the original-language line and their display names.
# ABOUTME: Used by the CLI to label a record's original language.

# code -> (native name, English name)
LANGUAGE_NAMES: dict[str, tuple[str, str]] = {
    "ar": ("العربية", "Arabic"),
    "bg-BG": ("Български", "Bulgarian"),
    "cs-CZ": ("Čeština", "Czech"),
    "de-DE": ("Deutsch (Deutschland)", "German (Germany)"),
    "el-GR": ("Ελληνικά", "Greek"),
    "en-GB": ("English (UK)", "English (UK)"),
    "en-US": ("English (US)", "English (US)"),
    "es-ES": ("Español (España)", "Spanish (Spain)"),
    "fa-IR": ("فارسی", "Persian"),
    "fr-FR": ("Français (France)", "French (France)"),
    "he-IL": ("עברית", "Hebrew"),
    "hi-IN": ("हिंदी", "Hindi"),
    "it-IT": ("Italiano", "Italian"),
    "ja-JP": ("日本語", "Japanese"),
    "km-KH": ("ភាសាខ្មែរ", "Khmer"),
    "ko-KR": ("한국어", "Korean"),
    "la": ("Latina", "Latin"),
    "mn-MN": ("Монгол", "Mongolian"),
    "pl-PL": ("Polski", "Polish"),
    "pt-BR": ("Português (Brasil)", "Portuguese (Brazil)"),
    "ru-RU": ("Русский", "Russian"),
    "sr-RS": ("Српски / Srpski", "Serbian"),
    "th-TH": ("ไทย", "Thai"),
    "tr-TR": ("Türkçe", "Turkish"),
    "uk-UA": ("Українська", "Ukrainian"),
    "vi-VN": ("Tiếng Việt", "Vietnamese"),
    "zh-CN": ("简体中文", "Chinese (Simplified)"),
    "zh-TW": ("繁體中文", "Chinese (Traditional)"),
}


def is_known_language(code: str | None) -> bool:
    """Whether the code, or another region of its base language, is listed.

    "zh-HK" counts as known because "zh-CN" is listed.
    """
    if not code:
        return False
    if code in LANGUAGE_NAMES:
        return True
    base = code.lower().split("-")[0]
    if not base:
        return False
    return any(
        known.lower() == base or known.lower().startswith(f"{base}-")
        for known in LANGUAGE_NAMES
    )


def language_label(code: str) -> str:
    """Format a code for display, e.g. "ja-JP - 日本語 (Japanese)"."""
    names = LANGUAGE_NAMES.get(code)
    if names is None:
        return f"{code} (unknown)"
    native, english = names
    return f"{code} - {native} ({english})"
