"""
Relationship Index
==================

Many-to-many links between countries and the currencies and languages used
in them. Both directions are generated from the one authored usage table, so
they cannot disagree: a currency lists a country exactly when that country
lists the currency, and likewise for languages.

Every lookup returns a tuple ordered by catalogue definition order, empty
when the entity has no recorded relationship.
"""

import logging
import threading
from typing import Dict, List, Tuple, Type

from .catalogue import CatalogueEntry
from .data import COUNTRY_USAGE, Country, Currency, Language


def _catalogue_order(entity_class: Type[CatalogueEntry]) -> Dict[CatalogueEntry, int]:
    return {entity: position for position, entity in enumerate(entity_class)}


class RelationshipIndex:
    """
    Bidirectional country/currency and country/language index.
    """

    def __init__(self, usage: Dict[str, Tuple[str, str]] = None):
        self._usage = COUNTRY_USAGE if usage is None else usage
        self._currencies_by_country: Dict[Country, Tuple[Currency, ...]] = {}
        self._languages_by_country: Dict[Country, Tuple[Language, ...]] = {}
        self._countries_by_currency: Dict[Currency, Tuple[Country, ...]] = {}
        self._countries_by_language: Dict[Language, Tuple[Country, ...]] = {}
        self._lock = threading.Lock()
        self._initialized = False

    def initialize(self):
        """
        Build both directions of the index from the usage table.

        Raises:
            KeyError: the usage table names a country, currency or language
                missing from its catalogue
        """
        if self._initialized:
            return

        with self._lock:
            if self._initialized:
                return
            self._build()
            self._initialized = True

        currency_edges = sum(len(currencies) for currencies in self._currencies_by_country.values())
        language_edges = sum(len(languages) for languages in self._languages_by_country.values())
        logging.info(
            f"Relationship index initialized: {currency_edges} country/currency links, "
            f"{language_edges} country/language links"
        )

    def _build(self):
        unknown = set(self._usage) - {country.alpha2 for country in Country}
        if unknown:
            raise KeyError(f"Usage table names unknown countries: {sorted(unknown)}")

        currency_order = _catalogue_order(Currency)
        language_order = _catalogue_order(Language)

        countries_by_currency: Dict[Currency, List[Country]] = {currency: [] for currency in Currency}
        countries_by_language: Dict[Language, List[Country]] = {language: [] for language in Language}

        # Walking countries in definition order keeps the inverse lists in catalogue order
        for country in Country:
            currency_codes, language_codes = self._usage.get(country.alpha2, ('', ''))
            currencies = sorted({Currency[code] for code in currency_codes.split()},
                                key=currency_order.__getitem__)
            languages = sorted({Language[code] for code in language_codes.split()},
                               key=language_order.__getitem__)

            self._currencies_by_country[country] = tuple(currencies)
            self._languages_by_country[country] = tuple(languages)
            for currency in currencies:
                countries_by_currency[currency].append(country)
            for language in languages:
                countries_by_language[language].append(country)

        self._countries_by_currency = {currency: tuple(countries)
                                       for currency, countries in countries_by_currency.items()}
        self._countries_by_language = {language: tuple(countries)
                                       for language, countries in countries_by_language.items()}

    def currencies_of(self, country: Country) -> Tuple[Currency, ...]:
        """
        Get the currencies used in a country.

        Args:
            country: Country member

        Returns:
            Tuple of Currency members, empty if none are recorded
        """
        if not self._initialized:
            self.initialize()

        return self._currencies_by_country[self._check(country, Country)]

    def languages_of(self, country: Country) -> Tuple[Language, ...]:
        """
        Get the languages used in a country.

        Args:
            country: Country member

        Returns:
            Tuple of Language members, empty if none are recorded
        """
        if not self._initialized:
            self.initialize()

        return self._languages_by_country[self._check(country, Country)]

    def countries_using(self, entity: CatalogueEntry) -> Tuple[Country, ...]:
        """
        Get the countries using a currency or a language.

        Args:
            entity: Currency or Language member

        Returns:
            Tuple of Country members, empty if none are recorded
        """
        if not self._initialized:
            self.initialize()

        if isinstance(entity, Currency):
            return self._countries_by_currency[entity]
        if isinstance(entity, Language):
            return self._countries_by_language[entity]
        raise TypeError(f"Expected a Currency or Language, got {entity!r}")

    def countries_using_currency(self, currency: Currency) -> Tuple[Country, ...]:
        return self.countries_using(self._check(currency, Currency))

    def countries_using_language(self, language: Language) -> Tuple[Country, ...]:
        return self.countries_using(self._check(language, Language))

    def currency_links(self) -> List[Tuple[Country, Currency]]:
        """All (country, currency) pairs, in country then currency catalogue order."""
        if not self._initialized:
            self.initialize()

        return [(country, currency)
                for country, currencies in self._currencies_by_country.items()
                for currency in currencies]

    def language_links(self) -> List[Tuple[Country, Language]]:
        """All (country, language) pairs, in country then language catalogue order."""
        if not self._initialized:
            self.initialize()

        return [(country, language)
                for country, languages in self._languages_by_country.items()
                for language in languages]

    @staticmethod
    def _check(entity, entity_class):
        if not isinstance(entity, entity_class):
            raise TypeError(f"Expected a {entity_class.__name__}, got {entity!r}")
        return entity


relationship_index = RelationshipIndex()
