import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kommissar_digest.services.taxonomy import (
    KEYWORD_TAXONOMY,
    LOCATIONS_CATEGORY,
    CategoryDefinition,
)


class TestKeywordTaxonomy(unittest.TestCase):

    def test_expected_categories(self):
        self.assertEqual(
            list(KEYWORD_TAXONOMY),
            ["core", "leaders", "institutions", "events", "related", LOCATIONS_CATEGORY],
        )

    def test_weights_are_positive_halves(self):
        for category in KEYWORD_TAXONOMY.values():
            self.assertGreater(category.weight, 0)
            self.assertEqual(category.weight * 2, int(category.weight * 2))

    def test_terms_are_lowercase_and_non_empty(self):
        for category in KEYWORD_TAXONOMY.values():
            self.assertTrue(category.terms)
            for term in category.terms:
                self.assertTrue(term)
                self.assertEqual(term, term.strip().lower())

    def test_core_outweighs_locations(self):
        self.assertGreater(
            KEYWORD_TAXONOMY["core"].weight, KEYWORD_TAXONOMY[LOCATIONS_CATEGORY].weight
        )

    def test_taxonomy_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORD_TAXONOMY["extra"] = CategoryDefinition("extra", 1, ("term",))  # type: ignore[index]

    def test_rejects_fractional_weight(self):
        with self.assertRaises(ValueError):
            CategoryDefinition("bad", 1.3, ("term",))

    def test_rejects_non_positive_weight(self):
        with self.assertRaises(ValueError):
            CategoryDefinition("bad", 0, ("term",))

    def test_rejects_uppercase_term(self):
        with self.assertRaises(ValueError):
            CategoryDefinition("bad", 1, ("Lenin",))

    def test_rejects_empty_term(self):
        with self.assertRaises(ValueError):
            CategoryDefinition("bad", 1, ("",))


if __name__ == '__main__':
    unittest.main()
