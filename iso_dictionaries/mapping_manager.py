"""
Mapping Manager Module
======================

This module manages the bidirectional mappings between codes and catalogue
entities, one pair of maps per domain and code form, so that lookup is O(1)
in both directions.

The maps are built once from the static catalogues on first use and never
change afterwards; reads need no locking.
"""

import logging
import threading
from typing import Dict, Optional, Type, Union

from . import config
from .codes import CodeForm, CODE_CLASSES
from .catalogue import CatalogueEntry
from .data import Country, Currency, Language

# Domain name -> entity catalogue
CATALOGUES: Dict[str, Type[CatalogueEntry]] = {
    'country': Country,
    'currency': Currency,
    'language': Language,
}


class MappingManager:
    """
    Manages bidirectional mappings between codes and catalogue entities.
    """

    def __init__(self):
        self._mappings: Dict[str, Dict[CodeForm, Dict[Union[str, int], CatalogueEntry]]] = {}
        self._reverse_mappings: Dict[str, Dict[CodeForm, Dict[CatalogueEntry, Union[str, int]]]] = {}
        self._lock = threading.Lock()
        self._initialized = False

    def initialize(self):
        """
        Initialize the mapping manager by indexing every catalogue.

        Raises:
            ValueError: the static data breaks the one-to-one mapping of a
                code form, or a catalogue does not have its published size
        """
        if self._initialized:
            return

        with self._lock:
            if self._initialized:
                return

            for domain, entity_class in CATALOGUES.items():
                self._load_catalogue(domain, entity_class)

            self._initialized = True

        counts = ', '.join(f"{len(CATALOGUES[domain])} {domain} entries" for domain in CATALOGUES)
        logging.info(f"Code registry initialized: {counts}")

    def _load_catalogue(self, domain: str, entity_class: Type[CatalogueEntry]):
        """
        Index one catalogue in every code form its domain supports.
        """
        expected = config.EXPECTED_COUNTS.get(domain)
        if expected is not None and len(entity_class) != expected:
            raise ValueError(
                f"{domain} catalogue has {len(entity_class)} entries, expected {expected}"
            )

        mappings = {}
        reverse_mappings = {}
        for form in CODE_CLASSES[domain].FORMS:
            forward = {}
            reverse = {}
            for entity in entity_class:
                value = entity.raw_code(form)
                if value in forward:
                    raise ValueError(
                        f"Duplicate {domain} {form} code {value!r}: "
                        f"{forward[value]!r} and {entity!r}"
                    )
                forward[value] = entity
                reverse[entity] = value
            mappings[form] = forward
            reverse_mappings[form] = reverse

        self._mappings[domain] = mappings
        self._reverse_mappings[domain] = reverse_mappings
        logging.debug(f"Indexed {len(entity_class)} {domain} entries in {len(mappings)} code forms")

    def entity_class(self, domain: str) -> Type[CatalogueEntry]:
        """
        Get the entity catalogue of a domain.

        Args:
            domain: Domain name ('country', 'currency', 'language')
        """
        try:
            return CATALOGUES[domain]
        except KeyError:
            raise ValueError(f"Unknown domain: {domain!r}") from None

    def get_entity(self, domain: str, form: CodeForm, value: Union[str, int]) -> Optional[CatalogueEntry]:
        """
        Get the entity for the given canonical code value.

        Args:
            domain: Domain name ('country', 'currency', 'language')
            form: Code form of the value
            value: Canonical code value (uppercase text or int)

        Returns:
            The entity if the code is assigned, None otherwise
        """
        if not self._initialized:
            self.initialize()

        return self._mappings.get(domain, {}).get(form, {}).get(value)

    def get_code(self, domain: str, form: CodeForm, entity: CatalogueEntry) -> Union[str, int]:
        """
        Get the canonical code value of an entity.

        Every entity has exactly one value in every form of its domain, so
        this never fails for a supported form.
        """
        if not self._initialized:
            self.initialize()

        return self._reverse_mappings[domain][form][entity]

    def has_mapping(self, domain: str, form: CodeForm, value: Union[str, int]) -> bool:
        """
        Check if the canonical code value is assigned to an entity.
        """
        if not self._initialized:
            self.initialize()

        return value in self._mappings.get(domain, {}).get(form, {})

    def get_all_mappings(self, domain: str, form: CodeForm) -> Dict[Union[str, int], CatalogueEntry]:
        """
        Get all code to entity mappings of one form, in catalogue order.
        """
        if not self._initialized:
            self.initialize()

        return dict(self._mappings.get(domain, {}).get(form, {}))

    def get_all_reverse_mappings(self, domain: str, form: CodeForm) -> Dict[CatalogueEntry, Union[str, int]]:
        """
        Get all entity to code mappings of one form, in catalogue order.
        """
        if not self._initialized:
            self.initialize()

        return dict(self._reverse_mappings.get(domain, {}).get(form, {}))


registry = MappingManager()
