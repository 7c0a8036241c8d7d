import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kommissar_digest.services.relevance import MatchKind, match_term, score_text
from kommissar_digest.services.taxonomy import CategoryDefinition

# Small table so expected totals can be computed by hand
SMALL_TAXONOMY = {
    "core": CategoryDefinition("core", 3, ("communist", "soviet")),
    "leaders": CategoryDefinition("leaders", 2, ("lenin",)),
    "related": CategoryDefinition("related", 1, ("workers", "peasants", "insurgents")),
    "locations": CategoryDefinition("locations", 1, ("china", "moscow")),
}

# No keyword categories at all: only the probe-driven rules can fire
RULES_ONLY_TAXONOMY = {
    "locations": CategoryDefinition("locations", 1, ("china",)),
}


class TestMatchTerm(unittest.TestCase):

    def test_whole_word_is_exact(self):
        self.assertIs(match_term("the communist party", "communist"), MatchKind.EXACT)

    def test_inside_larger_word_is_partial(self):
        self.assertIs(match_term("the communists", "communist"), MatchKind.PARTIAL)

    def test_absent_is_none(self):
        self.assertIs(match_term("capitalism prevails", "communist"), MatchKind.NONE)

    def test_multi_word_term(self):
        self.assertIs(match_term("the red army marched", "red army"), MatchKind.EXACT)


class TestScoreText(unittest.TestCase):

    def test_exact_match_adds_full_weight(self):
        result = score_text("The Communist delegation arrived", SMALL_TAXONOMY)
        self.assertEqual(result.score, 3.0)
        self.assertEqual(result.trace, ("core: 'communist' (exact, +3)",))

    def test_partial_match_adds_half_weight(self):
        result = score_text("Anticommunists marched", SMALL_TAXONOMY)
        self.assertEqual(result.score, 1.5)
        self.assertEqual(result.trace, ("core: 'communist' (partial, +1.5)",))

    def test_locations_alone_score_zero(self):
        result = score_text("A summit in Moscow and China", SMALL_TAXONOMY)
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.trace, ())

    def test_locations_count_after_other_match(self):
        result = score_text("Soviet delegation visits Moscow", SMALL_TAXONOMY)
        self.assertEqual(result.score, 4.0)
        self.assertEqual(result.trace[-1], "locations: 'moscow' (exact, +1)")

    def test_combined_terms_bonus(self):
        result = score_text("Workers and peasants rose together", SMALL_TAXONOMY)
        # 1 + 1 for the two related terms, +2 bonus
        self.assertEqual(result.score, 4.0)
        self.assertEqual(result.trace[-1], "combined terms bonus")

    def test_combined_bonus_applied_once_for_three_groups(self):
        result = score_text("Workers, peasants and insurgents", SMALL_TAXONOMY)
        self.assertEqual(result.score, 5.0)
        self.assertEqual(result.trace.count("combined terms bonus"), 1)

    def test_singular_forms_count_for_bonus(self):
        result = score_text("A worker and a peasant", RULES_ONLY_TAXONOMY)
        self.assertEqual(result.score, 2.0)
        self.assertIn("combined terms bonus", result.trace)

    def test_congress_bonus(self):
        result = score_text("The congress of workers opened", SMALL_TAXONOMY)
        self.assertEqual(result.score, 2.0)
        self.assertEqual(result.trace[-1], "congress bonus")

    def test_congress_without_group_has_no_bonus(self):
        result = score_text("The congress of Lenin's party", SMALL_TAXONOMY)
        self.assertEqual(result.score, 2.0)
        self.assertNotIn("congress bonus", result.trace)

    def test_war_without_context_floors_at_zero(self):
        result = score_text("The war reached China", SMALL_TAXONOMY)
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.trace, ("war without context penalty",))

    def test_war_penalty_subtracts_from_bonuses(self):
        result = score_text(
            "The congress of workers and peasants declared war", RULES_ONLY_TAXONOMY
        )
        # +2 combined, +1 congress, -2 penalty
        self.assertEqual(result.score, 1.0)
        self.assertEqual(
            result.trace,
            ("combined terms bonus", "congress bonus", "war without context penalty"),
        )

    def test_war_with_context_has_no_penalty(self):
        result = score_text("Lenin denounced the war", SMALL_TAXONOMY)
        self.assertEqual(result.score, 2.0)
        self.assertNotIn("war without context penalty", result.trace)

    def test_warsaw_is_not_war(self):
        result = score_text("Delegates met in Warsaw", RULES_ONLY_TAXONOMY)
        self.assertEqual(result.trace, ())


class TestDefaultTaxonomyScenarios(unittest.TestCase):

    def test_lenin_and_bolsheviks(self):
        result = score_text("Lenin and the Bolsheviks seized Petrograd")
        self.assertGreaterEqual(result.score, 5.0)
        self.assertIn("leaders: 'lenin' (exact, +2)", result.trace)
        self.assertIn("core: 'bolsheviks' (exact, +3)", result.trace)

    def test_generic_war_scores_zero(self):
        result = score_text("A great war began in Europe")
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.trace, ("war without context penalty",))

    def test_location_only_event_scores_zero(self):
        result = score_text("A trade fair opened in Havana")
        self.assertEqual(result.score, 0.0)

    def test_case_insensitive(self):
        self.assertEqual(
            score_text("STALIN SIGNED THE DECREE").score,
            score_text("stalin signed the decree").score,
        )


if __name__ == '__main__':
    unittest.main()
