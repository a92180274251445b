"""
Dictionary Manager Module
========================

This module provides the main entry point that coordinates the code registry
and the relationship index and offers a unified interface over all three
domains ('country', 'currency', 'language').
"""

import logging
from typing import Any, List, Optional, Tuple, Union

from .catalogue import CatalogueEntry
from .codes import Code, CodeForm, CODE_CLASSES, is_alpha2, is_alpha3, is_numeric
from .exceptions import InvalidCode, UnknownCode
from .mapping_manager import MappingManager, registry
from .relationships import RelationshipIndex, relationship_index


class DictionaryManager:
    """
    Main dictionary interface that coordinates the registry and the relationship index.
    """

    def __init__(self, mapping_manager: MappingManager = None,
                 relationships: RelationshipIndex = None):
        self.mapping_manager = mapping_manager or registry
        self.relationships = relationships or relationship_index
        self._initialized = False

    def initialize(self):
        """
        Initialize the registry and the relationship index.
        """
        if self._initialized:
            return

        self.mapping_manager.initialize()
        self.relationships.initialize()

        self._initialized = True
        logging.info("ISO dictionaries initialized")

    def _code_class(self, domain: str):
        try:
            return CODE_CLASSES[domain]
        except KeyError:
            raise ValueError(f"Unknown domain: {domain!r}") from None

    def parse(self, domain: str, raw: Any, form: Union[CodeForm, str, None] = None) -> CatalogueEntry:
        """
        Resolve a raw code to its entity.

        Args:
            domain: Domain name ('country', 'currency', 'language')
            raw: Code text or number (e.g. 'GB', 'gbr', 826, '826')
            form: Expected code form; detected from the shape when omitted

        Returns:
            The entity the code is assigned to

        Raises:
            InvalidCode: raw does not have the shape of the form
            UnknownCode: raw is well-formed but unassigned
        """
        if not self._initialized:
            self.initialize()

        return self._code_class(domain).parse(raw, form).entity()

    def get_entity(self, domain: str, raw: Any,
                   form: Union[CodeForm, str, None] = None) -> Optional[CatalogueEntry]:
        """
        Resolve a raw code to its entity.

        Returns:
            The entity if the code is assigned, None otherwise
        """
        try:
            return self.parse(domain, raw, form)
        except UnknownCode:
            return None

    def validate_code(self, domain: str, raw: Any, form: Union[CodeForm, str, None] = None) -> bool:
        """
        Check that a raw code is well-formed and assigned.
        """
        try:
            self.parse(domain, raw, form)
        except (InvalidCode, UnknownCode):
            return False
        return True

    def to_code(self, entity: CatalogueEntry, form: Union[CodeForm, str, None] = None) -> Code:
        """
        Get the code of an entity in the given form (the primary form by default).
        """
        if not self._initialized:
            self.initialize()

        return entity.code(form)

    def _convert(self, domain: str, raw: Any, form: CodeForm) -> Code:
        if not self._initialized:
            self.initialize()

        return self._code_class(domain).parse(raw).convert(form)

    def to_alpha2(self, raw: Any, domain: str = 'country') -> Code:
        """
        Convert any code of an entity to its alpha-2 code.

        Raises:
            InvalidCode: raw is malformed, or the domain has no alpha-2 form
            UnknownCode: raw is well-formed but unassigned
        """
        return self._convert(domain, raw, CodeForm.ALPHA2)

    def to_alpha3(self, raw: Any, domain: str = 'country') -> Code:
        """
        Convert any code of an entity to its alpha-3 code.

        Raises:
            InvalidCode: raw is malformed, or the domain has no alpha-3 form
            UnknownCode: raw is well-formed but unassigned
        """
        return self._convert(domain, raw, CodeForm.ALPHA3)

    def to_numeric(self, raw: Any, domain: str = 'country') -> Code:
        """
        Convert any code of an entity to its numeric code.

        Raises:
            InvalidCode: raw is malformed, or the domain has no numeric form
            UnknownCode: raw is well-formed but unassigned
        """
        return self._convert(domain, raw, CodeForm.NUMERIC)

    @staticmethod
    def is_alpha2(raw: Any) -> bool:
        return is_alpha2(raw)

    @staticmethod
    def is_alpha3(raw: Any) -> bool:
        return is_alpha3(raw)

    @staticmethod
    def is_numeric(raw: Any) -> bool:
        return is_numeric(raw)

    def get_all(self, domain: str) -> List[CatalogueEntry]:
        """
        Get every entity of a domain, in catalogue order.
        """
        return self.mapping_manager.entity_class(domain).all()

    def get_entity_count(self, domain: str) -> int:
        """
        Get the number of entities in a domain.
        """
        return len(self.mapping_manager.entity_class(domain))

    def allowed_values(self, domain: str, form: Union[CodeForm, str, None] = None) -> List[Union[str, int]]:
        """
        Get every valid value of a code form, for schema generation.
        """
        if not self._initialized:
            self.initialize()

        return self._code_class(domain).allowed_values(form)

    def currencies_of(self, country: CatalogueEntry) -> Tuple[CatalogueEntry, ...]:
        """
        Get the currencies used in a country.
        """
        if not self._initialized:
            self.initialize()

        return self.relationships.currencies_of(country)

    def languages_of(self, country: CatalogueEntry) -> Tuple[CatalogueEntry, ...]:
        """
        Get the languages used in a country.
        """
        if not self._initialized:
            self.initialize()

        return self.relationships.languages_of(country)

    def countries_using(self, entity: CatalogueEntry) -> Tuple[CatalogueEntry, ...]:
        """
        Get the countries using a currency or a language.
        """
        if not self._initialized:
            self.initialize()

        return self.relationships.countries_using(entity)


dictionary_manager = DictionaryManager()
