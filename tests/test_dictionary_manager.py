"""
Test Dictionary Manager
=======================

Unit tests for the unified lookup interface.
"""

import unittest

from iso_dictionaries import (
    CodeForm,
    Country,
    CountryCode,
    Currency,
    CurrencyCode,
    DictionaryManager,
    InvalidCode,
    Language,
    UnknownCode,
    dictionary_manager,
)


class TestDictionaryManager(unittest.TestCase):
    """Test cases for DictionaryManager."""

    def setUp(self):
        """Set up a manager over the shared registry."""
        self.manager = DictionaryManager()
        self.manager.initialize()

    def test_parse(self):
        """Codes in any form resolve to their entity."""
        self.assertIs(self.manager.parse('country', 'GB', CodeForm.ALPHA2), Country.GB)
        self.assertIs(self.manager.parse('country', 'GBR', 'alpha3'), Country.GB)
        self.assertIs(self.manager.parse('country', 826), Country.GB)
        self.assertIs(self.manager.parse('currency', '826'), Currency.GBP)
        self.assertIs(self.manager.parse('language', 'en'), Language.EN)

    def test_parse_failures(self):
        """Malformed and unassigned codes fail distinctly."""
        with self.assertRaises(InvalidCode):
            self.manager.parse('country', 'XYZ123', CodeForm.ALPHA2)
        with self.assertRaises(UnknownCode):
            self.manager.parse('country', 'ZZ', CodeForm.ALPHA2)
        with self.assertRaises(ValueError):
            self.manager.parse('planet', 'GB')

    def test_get_entity(self):
        """Unassigned codes give None, malformed ones still raise."""
        self.assertIs(self.manager.get_entity('currency', 'JPY'), Currency.JPY)
        self.assertIsNone(self.manager.get_entity('currency', 'ZZZ'))
        with self.assertRaises(InvalidCode):
            self.manager.get_entity('currency', 'JP')

    def test_validate_code(self):
        """Validation checks both shape and assignment."""
        self.assertTrue(self.manager.validate_code('country', 'de'))
        self.assertTrue(self.manager.validate_code('currency', 978))
        self.assertFalse(self.manager.validate_code('country', 'ZZ'))
        self.assertFalse(self.manager.validate_code('country', 'Germany'))
        self.assertFalse(self.manager.validate_code('language', 'DEU'))

    def test_to_code(self):
        """Entities give their code in the requested form."""
        self.assertEqual(self.manager.to_code(Country.GB), CountryCode('GB'))
        self.assertEqual(self.manager.to_code(Country.GB, CodeForm.NUMERIC).to_primitive(), 826)
        self.assertEqual(str(self.manager.to_code(Currency.GBP, 'numeric')), '826')

    def test_conversion(self):
        """Conversion between forms of one entity."""
        self.assertEqual(self.manager.to_alpha3('GB'), CountryCode('GBR'))
        self.assertEqual(self.manager.to_alpha2('GBR'), CountryCode('GB'))
        self.assertEqual(self.manager.to_alpha2(826), CountryCode('GB'))
        self.assertEqual(self.manager.to_numeric('EUR', domain='currency'), CurrencyCode(978))
        with self.assertRaises(InvalidCode):
            self.manager.to_alpha2('EUR', domain='currency')
        with self.assertRaises(UnknownCode):
            self.manager.to_alpha3('ZZ')

    def test_country_round_trip(self):
        """alpha-2 to alpha-3 and back is the identity for every country."""
        for country in Country:
            alpha3 = self.manager.to_alpha3(country.alpha2)
            self.assertEqual(str(alpha3), country.alpha3)
            self.assertEqual(str(self.manager.to_alpha2(alpha3)), country.alpha2)

    def test_shape_predicates(self):
        """Pattern checks are available from the manager."""
        self.assertTrue(DictionaryManager.is_alpha2('ZZ'))
        self.assertTrue(self.manager.is_alpha3('abc'))
        self.assertTrue(self.manager.is_numeric('999'))
        self.assertFalse(self.manager.is_numeric('99'))

    def test_enumeration(self):
        """Entity lists and counts per domain."""
        self.assertEqual(self.manager.get_entity_count('country'), 249)
        self.assertEqual(self.manager.get_entity_count('currency'), 179)
        self.assertEqual(self.manager.get_entity_count('language'), 183)
        self.assertEqual(self.manager.get_all('language')[0], Language.AA)
        with self.assertRaises(ValueError):
            self.manager.get_all('planet')

    def test_allowed_values(self):
        """Schema enumerations per domain and form."""
        self.assertIn('GBR', self.manager.allowed_values('country', CodeForm.ALPHA3))
        self.assertIn(826, self.manager.allowed_values('currency', 'numeric'))
        self.assertEqual(len(self.manager.allowed_values('language')), 183)

    def test_relationships(self):
        """Relationship lookups pass through to the index."""
        self.assertEqual(self.manager.currencies_of(Country.GB), (Currency.GBP,))
        self.assertEqual(self.manager.languages_of(Country.JP), (Language.JA,))
        self.assertIn(Country.GB, self.manager.countries_using(Currency.GBP))
        self.assertEqual(self.manager.countries_using(Currency.XAU), ())

    def test_shared_instance(self):
        """The module-level manager is ready to use."""
        self.assertIs(dictionary_manager.parse('country', 'FR'), Country.FR)


if __name__ == '__main__':
    unittest.main()
