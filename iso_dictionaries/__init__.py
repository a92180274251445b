"""
ISO Reference Dictionaries
==========================

This package provides typed, immutable catalogues of ISO reference data:
- Countries (ISO 3166-1 alpha-2, alpha-3 and numeric codes)
- Currencies (ISO 4217 alphabetic and numeric codes, minor-unit digits)
- Languages (ISO 639-1 two-letter codes)

together with bidirectional resolution between codes and entities, and the
relationships between them (the currencies and languages a country uses and
the countries using a given currency or language).

All data is fixed at import time; indexes are built once on first use and
are safe to read from any number of threads.
"""

# Code values and errors
from .codes import (
    Code,
    CodeForm,
    CountryCode,
    CurrencyCode,
    LanguageCode,
    detect_form,
    is_alpha2,
    is_alpha3,
    is_numeric,
)
from .exceptions import CodeError, InvalidCode, UnknownCode

# Entity catalogues
from .data import Country, Currency, Language

# Registry, relationships and the unified interface
from .mapping_manager import MappingManager, registry
from .relationships import RelationshipIndex, relationship_index
from .dictionary_manager import DictionaryManager, dictionary_manager

# Export and consistency checks
from .dictionaries import (
    catalogue_frame,
    create_dictionaries,
    dictionaries_exist,
    load_dictionary,
    relationship_frame,
)
from .integrity_check import check_integrity

__all__ = [
    'Code',
    'CodeForm',
    'CountryCode',
    'CurrencyCode',
    'LanguageCode',
    'detect_form',
    'is_alpha2',
    'is_alpha3',
    'is_numeric',
    'CodeError',
    'InvalidCode',
    'UnknownCode',
    'Country',
    'Currency',
    'Language',
    'MappingManager',
    'registry',
    'RelationshipIndex',
    'relationship_index',
    'DictionaryManager',
    'dictionary_manager',
    'catalogue_frame',
    'create_dictionaries',
    'dictionaries_exist',
    'load_dictionary',
    'relationship_frame',
    'check_integrity',
]
