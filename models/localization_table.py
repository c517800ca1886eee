# -*- coding: utf-8 -*-
"""
locimport LocalizationTable Model

Identifiers x languages -> text, as parsed from a copied sheet.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from locimport_exceptions import InvalidTableError


@dataclass(frozen=True)
class LocalizationTable:
    """
    Immutable table of translated texts.

    Attributes:
        identifiers (Tuple[str, ...]): Row keys in sheet order. Duplicates and
            blank identifiers are kept; each row index maps to one text.
        languages (Tuple[str, ...]): Distinct language codes in column order.
        texts (Mapping[str, Tuple[str, ...]]): Language code to texts,
            index-aligned with ``identifiers``.
    """
    identifiers: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    texts: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        identifiers = tuple(self.identifiers)
        languages = tuple(self.languages)
        texts: Dict[str, Tuple[str, ...]] = {
            lang: tuple(values) for lang, values in self.texts.items()
        }

        if len(set(languages)) != len(languages):
            raise InvalidTableError("Duplicate language codes.", details={'languages': languages})
        if set(texts) != set(languages):
            raise InvalidTableError(
                "Texts must be keyed by exactly the table languages.",
                details={'languages': languages, 'keys': tuple(texts)},
            )
        for lang in languages:
            if len(texts[lang]) != len(identifiers):
                raise InvalidTableError(
                    f"Language {lang} has {len(texts[lang])} texts for {len(identifiers)} identifiers.",
                    details={'language': lang},
                )

        # Ordered by languages so iteration matches column order
        ordered = {lang: texts[lang] for lang in languages}
        object.__setattr__(self, 'identifiers', identifiers)
        object.__setattr__(self, 'languages', languages)
        object.__setattr__(self, 'texts', MappingProxyType(ordered))

    @classmethod
    def from_columns(cls, identifiers: Sequence[str],
                     columns: Sequence[Tuple[str, Sequence[str]]]) -> "LocalizationTable":
        """Build a table from (language, texts) pairs in column order."""
        return cls(
            identifiers=tuple(identifiers),
            languages=tuple(lang for lang, _ in columns),
            texts={lang: tuple(values) for lang, values in columns},
        )

    @property
    def row_count(self) -> int:
        return len(self.identifiers)

    def rows(self, language: str) -> Iterator[Tuple[str, str]]:
        """Yield (identifier, text) pairs for one language in table order."""
        return zip(self.identifiers, self.texts[language])
