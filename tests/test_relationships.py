"""
Test Relationship Index
=======================

Unit tests for the country/currency and country/language relationships.
"""

import unittest

from iso_dictionaries import Country, Currency, Language, RelationshipIndex, relationship_index


class TestRelationshipLookups(unittest.TestCase):
    """Test cases for both directions of the index."""

    def test_currencies_of(self):
        """Currencies used in a country."""
        self.assertEqual(relationship_index.currencies_of(Country.GB), (Currency.GBP,))
        self.assertEqual(Country.CH.currencies(), (Currency.CHE, Currency.CHF, Currency.CHW))
        self.assertEqual(Country.US.currencies(), (Currency.USD, Currency.USN))

    def test_languages_of(self):
        """Languages used in a country."""
        self.assertEqual(Country.FR.languages(), (Language.FR,))
        self.assertEqual(Country.CH.languages(), (Language.DE, Language.FR, Language.IT, Language.RM))

    def test_countries_using_currency(self):
        """Countries using a currency, in catalogue order."""
        self.assertEqual(
            Currency.GBP.countries(),
            (Country.GB, Country.GG, Country.IM, Country.JE, Country.SH),
        )
        euro_countries = Currency.EUR.countries()
        self.assertIn(Country.FR, euro_countries)
        self.assertIn(Country.DE, euro_countries)
        self.assertNotIn(Country.GB, euro_countries)

    def test_countries_using_language(self):
        """Countries using a language."""
        english = relationship_index.countries_using(Language.EN)
        self.assertIn(Country.GB, english)
        self.assertIn(Country.US, english)
        self.assertEqual(relationship_index.countries_using_language(Language.JA), (Country.JP,))

    def test_no_relationships_is_empty(self):
        """Valid entities without links give empty results."""
        self.assertEqual(Country.AQ.currencies(), ())
        self.assertEqual(Country.AQ.languages(), ())
        self.assertEqual(Currency.XAU.countries(), ())
        self.assertEqual(Language.AE.countries(), ())

    def test_wrong_entity_type(self):
        """Lookups reject entities of the wrong domain."""
        with self.assertRaises(TypeError):
            relationship_index.currencies_of(Currency.GBP)
        with self.assertRaises(TypeError):
            relationship_index.countries_using(Country.GB)
        with self.assertRaises(TypeError):
            relationship_index.countries_using_currency(Language.EN)

    def test_results_in_catalogue_order(self):
        """Every result follows catalogue definition order."""
        country_order = {country: i for i, country in enumerate(Country)}
        currency_order = {currency: i for i, currency in enumerate(Currency)}
        for currency in Currency:
            positions = [country_order[country] for country in currency.countries()]
            self.assertEqual(positions, sorted(positions))
        for country in Country:
            positions = [currency_order[currency] for currency in country.currencies()]
            self.assertEqual(positions, sorted(positions))


class TestRelationshipSymmetry(unittest.TestCase):
    """Test cases for consistency between the two directions."""

    def test_currency_symmetry(self):
        """k in currenciesOf(c) iff c in countriesUsing(k)."""
        for country in Country:
            for currency in Currency:
                self.assertEqual(currency in country.currencies(), country in currency.countries())

    def test_language_symmetry(self):
        """l in languagesOf(c) iff c in countriesUsing(l)."""
        for country in Country:
            for language in Language:
                self.assertEqual(language in country.languages(), country in language.countries())

    def test_link_lists(self):
        """Edge lists agree with per-entity lookups."""
        links = relationship_index.currency_links()
        self.assertIn((Country.GB, Currency.GBP), links)
        self.assertEqual(len(links), sum(len(country.currencies()) for country in Country))
        self.assertEqual(len(relationship_index.language_links()), 354)


class TestCustomUsageTable(unittest.TestCase):
    """Test cases for indexes built from other usage tables."""

    def test_partial_table(self):
        """Countries missing from the table have no links."""
        index = RelationshipIndex({'GB': ('GBP', 'EN CY'), 'IE': ('EUR', 'EN GA')})
        self.assertEqual(index.languages_of(Country.GB), (Language.CY, Language.EN))
        self.assertEqual(index.countries_using(Language.EN), (Country.GB, Country.IE))
        self.assertEqual(index.currencies_of(Country.FR), ())

    def test_unknown_country_rejected(self):
        """A table naming a country outside the catalogue fails to build."""
        index = RelationshipIndex({'XX': ('EUR', 'EN')})
        with self.assertRaises(KeyError):
            index.initialize()

    def test_unknown_currency_rejected(self):
        """A table naming a currency outside the catalogue fails to build."""
        index = RelationshipIndex({'GB': ('QQQ', 'EN')})
        with self.assertRaises(KeyError):
            index.initialize()


if __name__ == '__main__':
    unittest.main()
