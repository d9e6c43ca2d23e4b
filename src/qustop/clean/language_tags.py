"""
Language tag resolution.

Reduces a BCP 47 tag ("en-US", "pt_BR", "zh-Hant-TW") or an ISO 639 code
("en", "eng", "fre") to its base language code. Malformed input resolves
to the empty string, which no dictionary is registered under.
"""

import re
from typing import Dict

_subtag_pattern = re.compile(r'^[A-Za-z0-9]{1,8}$')
_language_pattern = re.compile(r'^[A-Za-z]{2,3}$')

# ISO 639-2 (terminology and bibliographic) codes for the two-letter codes
# the bundled dictionaries and their neighbours use
ISO_639_2_TO_1: Dict[str, str] = {
    'ara': 'ar',
    'bul': 'bg',
    'cat': 'ca',
    'ces': 'cs', 'cze': 'cs',
    'dan': 'da',
    'deu': 'de', 'ger': 'de',
    'ell': 'el', 'gre': 'el',
    'eng': 'en',
    'spa': 'es',
    'fas': 'fa', 'per': 'fa',
    'fin': 'fi',
    'fra': 'fr', 'fre': 'fr',
    'heb': 'he',
    'hin': 'hi',
    'hun': 'hu',
    'ind': 'id',
    'ita': 'it',
    'jpn': 'ja',
    'khm': 'km',
    'kor': 'ko',
    'lav': 'lv',
    'lit': 'lt',
    'nld': 'nl', 'dut': 'nl',
    'nor': 'no',
    'pol': 'pl',
    'por': 'pt',
    'ron': 'ro', 'rum': 'ro',
    'rus': 'ru',
    'slk': 'sk', 'slo': 'sk',
    'slv': 'sl',
    'swe': 'sv',
    'tha': 'th',
    'tur': 'tr',
    'ukr': 'uk',
    'vie': 'vi',
    'zho': 'zh', 'chi': 'zh',
}

# Deprecated ISO 639-1 codes and their replacements
DEPRECATED_CODES: Dict[str, str] = {
    'iw': 'he',
    'in': 'id',
    'ji': 'yi',
    'jw': 'jv',
    'mo': 'ro',
}

# Special primary subtags that carry no language
_NO_LANGUAGE = {'und', 'mul', 'zxx', 'mis'}


def resolve_base_language_code(tag: str) -> str:
    """
    Resolve a language tag or code to its base language code.

    Args:
        tag: BCP 47 tag, POSIX locale name or ISO 639-1/639-2 code

    Returns:
        Lowercase base language code, or "" if the tag is malformed
    """
    if not tag or not isinstance(tag, str):
        return ""

    # POSIX locale names: en_US.UTF-8, de_DE@euro
    tag = tag.strip().split('.', 1)[0].split('@', 1)[0]
    subtags = tag.replace('_', '-').split('-')

    if not all(_subtag_pattern.match(subtag) for subtag in subtags):
        return ""

    primary = subtags[0].lower()
    if not _language_pattern.match(primary):
        # Private use ("x-...") and grandfathered ("i-...") tags
        return ""
    if primary in _NO_LANGUAGE:
        return ""

    if len(primary) == 3:
        primary = ISO_639_2_TO_1.get(primary, primary)
    return DEPRECATED_CODES.get(primary, primary)
