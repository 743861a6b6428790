"""Helpers that turn flat bilingual form output into API payload shapes."""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from ..consts import LANGUAGE_SUFFIXES


def split_language_key(key: str) -> Optional[tuple[str, str]]:
    """Split ``"nameEn"`` into ``("name", "en")``; ``None`` when unsuffixed."""
    for suffix, language in LANGUAGE_SUFFIXES.items():
        if key.endswith(suffix) and len(key) > len(suffix):
            return key[: -len(suffix)], language
    return None


def nest_bilingual(
    data: Mapping[str, Any],
    keys: Optional[Iterable[str]] = None,
    localized_lists: Iterable[str] = (),
) -> dict[str, Any]:
    """Fold ``<base>En``/``<base>Ar`` pairs into ``<base>: {"en", "ar"}``.

    Only complete pairs are folded, and only for ``keys`` when given. Lists
    named in ``localized_lists`` go through ``localize_list``. Other entries
    are copied as they are, in their original order.

    Examples:
        >>> nest_bilingual({"nameEn": "Scalpel", "nameAr": "مشرط", "price": 3})
        {'name': {'en': 'Scalpel', 'ar': 'مشرط'}, 'price': 3}
    """
    wanted = set(keys) if keys is not None else None
    pairs: dict[str, dict[str, Any]] = {}
    for key, value in data.items():
        split = split_language_key(key)
        if split is None:
            continue
        base, language = split
        if wanted is None or base in wanted:
            pairs.setdefault(base, {})[language] = value

    complete = {base for base, langs in pairs.items() if len(langs) == len(LANGUAGE_SUFFIXES)}

    result: dict[str, Any] = {}
    for key, value in data.items():
        split = split_language_key(key)
        if split is not None and split[0] in complete:
            base = split[0]
            if base not in result:
                result[base] = {lang: pairs[base][lang] for lang in LANGUAGE_SUFFIXES.values()}
            continue
        result[key] = value

    for key in localized_lists:
        if key in result:
            result[key] = localize_list(result[key])
    return result


def localize_list(values: Optional[Iterable[str]]) -> list[dict[str, str]]:
    """Use each entry for both languages: ``["a"]`` -> ``[{"en": "a", "ar": "a"}]``."""
    return [{language: value for language in LANGUAGE_SUFFIXES.values()} for value in values or []]
