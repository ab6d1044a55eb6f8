"""String normalization applied before comparison.

The Unicode normalization forms are a direct pass-through to
``unicodedata.normalize``.
"""

import unicodedata
from typing import Union

from unisim._core.errors import ValidationError
from unisim._utils import ensure_str, normalize_mode
from unisim.enums import NormalizationMode

_FORMS = {
    NormalizationMode.NFC: "NFC",
    NormalizationMode.NFD: "NFD",
    NormalizationMode.NFKC: "NFKC",
    NormalizationMode.NFKD: "NFKD",
    NormalizationMode.UNICODE_NFKD: "NFKD",
}

_FORM_NAMES = frozenset(_FORMS.values())


def _is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def normalize_unicode(text: str, form: str = "NFC") -> str:
    """Apply a Unicode normalization form (NFC, NFD, NFKC or NFKD).

    Example:
        >>> normalize_unicode("cafe\\u0301") == "caf\\u00e9"
        True
    """
    ensure_str(text, "text")
    if form not in _FORM_NAMES:
        raise ValidationError(
            f"Unknown normalization form: '{form}'. Valid options: {sorted(_FORM_NAMES)}"
        )
    return unicodedata.normalize(form, text)


def normalize_string(text: str, mode: Union[str, NormalizationMode]) -> str:
    """Normalize a string according to the specified mode.

    Args:
        text: String to normalize
        mode: Normalization mode - one of:
              "lowercase", "nfc", "nfd", "nfkc", "nfkd", "unicode_nfkd",
              "remove_punctuation", "remove_whitespace", "strict".
              Can also use NormalizationMode enum values.

    Returns:
        Normalized string

    Raises:
        ValidationError: If the mode is not recognized.

    Example:
        >>> normalize_string("  Hello, World!  ", "strict")
        'helloworld'
        >>> normalize_string("Hello", NormalizationMode.LOWERCASE)
        'hello'
    """
    ensure_str(text, "text")
    mode = normalize_mode(mode)

    if mode in _FORMS:
        return unicodedata.normalize(_FORMS[mode], text)
    if mode is NormalizationMode.LOWERCASE:
        return text.lower()
    if mode is NormalizationMode.REMOVE_PUNCTUATION:
        return "".join(ch for ch in text if not _is_punctuation(ch))
    if mode is NormalizationMode.REMOVE_WHITESPACE:
        return "".join(ch for ch in text if not ch.isspace())

    # STRICT
    text = unicodedata.normalize("NFKD", text).lower()
    return "".join(ch for ch in text if not (ch.isspace() or _is_punctuation(ch)))


def normalize_pair(
    a: str, b: str, mode: Union[str, NormalizationMode]
) -> tuple[str, str]:
    """Normalize both strings according to the specified mode.

    Example:
        >>> normalize_pair("Hello", "WORLD", "lowercase")
        ('hello', 'world')
    """
    mode = normalize_mode(mode)
    return normalize_string(a, mode), normalize_string(b, mode)


__all__ = ["normalize_string", "normalize_pair", "normalize_unicode"]
