"""
Test Mapping Manager
====================

Unit tests for the bidirectional code registry.
"""

import unittest

from iso_dictionaries import CodeForm, Country, Currency, Language, MappingManager
from iso_dictionaries import config
from iso_dictionaries.catalogue import CountryEntry


class TestMappingManager(unittest.TestCase):
    """Test cases for registry construction and lookup."""

    def setUp(self):
        """Set up a fresh registry."""
        self.manager = MappingManager()
        self.manager.initialize()

    def test_bidirectional_mapping(self):
        """Codes map to entities and back."""
        self.assertIs(self.manager.get_entity('country', CodeForm.ALPHA2, 'GB'), Country.GB)
        self.assertIs(self.manager.get_entity('country', CodeForm.NUMERIC, 826), Country.GB)
        self.assertEqual(self.manager.get_code('country', CodeForm.ALPHA3, Country.GB), 'GBR')
        self.assertEqual(self.manager.get_code('currency', CodeForm.NUMERIC, Currency.GBP), 826)
        self.assertEqual(self.manager.get_code('language', CodeForm.ALPHA2, Language.EN), 'EN')

    def test_missing_mapping(self):
        """Unassigned values give None."""
        self.assertIsNone(self.manager.get_entity('country', CodeForm.ALPHA2, 'ZZ'))
        self.assertFalse(self.manager.has_mapping('country', CodeForm.ALPHA2, 'ZZ'))
        self.assertFalse(self.manager.has_mapping('language', CodeForm.NUMERIC, 1))
        self.assertTrue(self.manager.has_mapping('currency', CodeForm.ALPHA3, 'EUR'))

    def test_every_form_is_one_to_one(self):
        """Each form has exactly one value per entity."""
        for domain, forms in (('country', (CodeForm.ALPHA2, CodeForm.ALPHA3, CodeForm.NUMERIC)),
                              ('currency', (CodeForm.ALPHA3, CodeForm.NUMERIC)),
                              ('language', (CodeForm.ALPHA2,))):
            entity_count = len(self.manager.entity_class(domain))
            for form in forms:
                mappings = self.manager.get_all_mappings(domain, form)
                reverse = self.manager.get_all_reverse_mappings(domain, form)
                self.assertEqual(len(mappings), entity_count)
                self.assertEqual(len(reverse), entity_count)
                for value, entity in mappings.items():
                    self.assertEqual(reverse[entity], value)

    def test_mappings_are_copies(self):
        """Returned mappings cannot alter the registry."""
        mappings = self.manager.get_all_mappings('country', CodeForm.ALPHA2)
        mappings.clear()
        self.assertIs(self.manager.get_entity('country', CodeForm.ALPHA2, 'FR'), Country.FR)

    def test_lazy_initialization(self):
        """Lookups initialise the registry on first use."""
        manager = MappingManager()
        self.assertIs(manager.get_entity('currency', CodeForm.ALPHA3, 'JPY'), Currency.JPY)

    def test_unknown_domain(self):
        """Domains outside the three are rejected."""
        with self.assertRaises(ValueError):
            self.manager.entity_class('planet')


class TestCatalogueValidation(unittest.TestCase):
    """Test cases for the load-time checks on static data."""

    def setUp(self):
        """Save the expected counts."""
        self.original_counts = dict(config.EXPECTED_COUNTS)

    def tearDown(self):
        """Restore the expected counts."""
        config.EXPECTED_COUNTS.clear()
        config.EXPECTED_COUNTS.update(self.original_counts)

    def test_count_mismatch_rejected(self):
        """A catalogue without its published size fails to load."""
        class ShortCatalogue(CountryEntry):
            AA = ('AAA', 1, 'First')

        with self.assertRaises(ValueError):
            MappingManager()._load_catalogue('country', ShortCatalogue)

    def test_duplicate_code_rejected(self):
        """Two entities sharing a code value break the bijection."""
        class DuplicateCatalogue(CountryEntry):
            AA = ('AAA', 1, 'First')
            BB = ('AAA', 2, 'Second')

        config.EXPECTED_COUNTS.pop('country')
        with self.assertRaises(ValueError):
            MappingManager()._load_catalogue('country', DuplicateCatalogue)


if __name__ == '__main__':
    unittest.main()
