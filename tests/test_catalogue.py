"""
Test Entity Catalogues
======================

Unit tests for the country, currency and language catalogues.
"""

import unittest

from iso_dictionaries import (
    CodeForm,
    Country,
    CountryCode,
    Currency,
    CurrencyCode,
    InvalidCode,
    Language,
    LanguageCode,
    UnknownCode,
)


class TestCatalogueEnumeration(unittest.TestCase):
    """Test cases for all() and catalogue sizes."""

    def test_published_counts(self):
        """Each catalogue has its published size."""
        self.assertEqual(len(Country.all()), 249)
        self.assertEqual(len(Currency.all()), 179)
        self.assertEqual(len(Language.all()), 183)

    def test_all_is_stable(self):
        """Repeated calls give the same members in the same order."""
        self.assertEqual(Country.all(), Country.all())
        self.assertEqual(Currency.all(), list(Currency))
        first = Language.all()
        first.clear()
        self.assertEqual(len(Language.all()), 183)

    def test_definition_order(self):
        """Enumeration follows definition order."""
        countries = Country.all()
        self.assertIs(countries[0], Country.AD)
        self.assertIs(countries[-1], Country.ZW)
        self.assertIs(Currency.all()[0], Currency.AED)


class TestEntityProperties(unittest.TestCase):
    """Test cases for per-entity accessors."""

    def test_country_properties(self):
        """Names and codes of a country."""
        country = Country.GB
        self.assertEqual(country.full_name, 'United Kingdom of Great Britain and Northern Ireland')
        self.assertEqual(country.alpha2, 'GB')
        self.assertEqual(country.alpha3, 'GBR')
        self.assertEqual(country.numeric, 826)
        self.assertEqual(Country.US.full_name, 'United States of America')

    def test_currency_properties(self):
        """Names, codes and minor units of currencies."""
        self.assertEqual(Currency.GBP.full_name, 'Pound sterling')
        self.assertEqual(Currency.GBP.alpha3, 'GBP')
        self.assertEqual(Currency.GBP.numeric, 826)
        self.assertEqual(Currency.GBP.digits, 2)
        self.assertEqual(Currency.JPY.digits, 0)
        self.assertEqual(Currency.BHD.digits, 3)
        self.assertEqual(Currency.CLF.digits, 4)

    def test_language_properties(self):
        """Names and codes of a language."""
        self.assertEqual(Language.EN.full_name, 'English')
        self.assertEqual(Language.EN.alpha2, 'EN')

    def test_str_and_repr(self):
        """str is the canonical name; repr shows code and name."""
        self.assertEqual(str(Country.CH), 'Switzerland')
        self.assertEqual(f"{Currency.EUR}", 'Euro')
        self.assertEqual(repr(Language.FR), '<Language.FR: French>')

    def test_identity_equality(self):
        """Members are singletons, distinct across domains."""
        self.assertIs(Country.from_code('gb'), Country.GB)
        self.assertEqual(hash(Country.GB), hash(Country.from_code('GBR')))
        self.assertNotEqual(Country.AE, Language.AE)

    def test_domain(self):
        """Each catalogue knows its domain and code type."""
        self.assertEqual(Country.domain(), 'country')
        self.assertEqual(Currency.GBP.domain(), 'currency')
        self.assertIs(Language.code_class(), LanguageCode)


class TestEntityCodes(unittest.TestCase):
    """Test cases for entity/code conversion."""

    def test_code_default_form(self):
        """The primary form is used when none is given."""
        self.assertEqual(Country.GB.code(), CountryCode('GB'))
        self.assertEqual(Currency.GBP.code(), CurrencyCode('GBP'))
        self.assertEqual(Language.EN.code(), LanguageCode('EN'))

    def test_code_every_form(self):
        """to_code is total over supported forms."""
        for country in Country:
            for form in CountryCode.FORMS:
                self.assertIs(country.code(form).entity(), country)
        for currency in Currency:
            for form in CurrencyCode.FORMS:
                self.assertIs(currency.code(form).entity(), currency)

    def test_code_round_trip_through_text(self):
        """parse(toCode(e, f), f) == e for every entity and form."""
        for entity_class in (Country, Currency, Language):
            code_class = entity_class.code_class()
            for entity in entity_class:
                for form in code_class.FORMS:
                    text = str(entity.code(form))
                    self.assertIs(entity_class.from_code(text, form), entity)

    def test_code_unsupported_form(self):
        """Asking for a form the domain lacks is rejected."""
        with self.assertRaises(InvalidCode):
            Currency.EUR.code(CodeForm.ALPHA2)
        with self.assertRaises(InvalidCode):
            Language.EN.code(CodeForm.NUMERIC)

    def test_from_code(self):
        """Entity lookup from raw codes in any form."""
        self.assertIs(Country.from_code('GB'), Country.GB)
        self.assertIs(Country.from_code(840), Country.US)
        self.assertIs(Currency.from_code('978'), Currency.EUR)
        self.assertIs(Language.from_code('de'), Language.DE)
        self.assertIs(Country.from_code(CountryCode('FRA')), Country.FR)
        with self.assertRaises(UnknownCode):
            Country.from_code('ZZ')
        with self.assertRaises(InvalidCode):
            Country.from_code('United Kingdom')

    def test_get(self):
        """get() returns None for unassigned codes."""
        self.assertIs(Country.get('JPN'), Country.JP)
        self.assertIsNone(Country.get('ZZZ'))
        self.assertIsNone(Currency.get(1))

    def test_find_by_name(self):
        """Exact canonical-name lookup."""
        self.assertIs(Country.find_by_name('Switzerland'), Country.CH)
        self.assertIs(Currency.find_by_name('Euro'), Currency.EUR)
        self.assertIs(Language.find_by_name('French'), Language.FR)
        self.assertIsNone(Country.find_by_name('switzerland'))
        self.assertIsNone(Country.find_by_name('Atlantis'))


if __name__ == '__main__':
    unittest.main()
