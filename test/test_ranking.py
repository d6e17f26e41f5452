"""Tests for the match predicate and result ordering."""

import math
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PokeCatalog.core.query import ParsedQuery, SearchRequest, parse_search_query
from PokeCatalog.core.ranking import (
    MatchScore,
    compute_match_scores,
    matches_terms,
    relevance_score,
    search,
    sort_records,
)
from sample_records import (
    ALL_RECORDS,
    BULBASAUR,
    CHARMANDER,
    CHARMELEON,
    PIKACHU,
    names,
)


class TestMatchesTerms(unittest.TestCase):
    def test_empty_query_matches_everything(self) -> None:
        for record in ALL_RECORDS:
            self.assertTrue(matches_terms(record, ParsedQuery()))

    def test_type_term_filters(self) -> None:
        parsed = parse_search_query(":fire")

        self.assertFalse(matches_terms(BULBASAUR, parsed))
        self.assertTrue(matches_terms(CHARMANDER, parsed))

    def test_name_terms_are_and_combined(self) -> None:
        parsed = parse_search_query("char meleon")

        self.assertTrue(matches_terms(CHARMELEON, parsed))
        self.assertFalse(matches_terms(CHARMANDER, parsed))

    def test_name_group_checks_padded_id(self) -> None:
        self.assertTrue(matches_terms(CHARMANDER, parse_search_query("004")))
        self.assertTrue(matches_terms(CHARMANDER, parse_search_query("4")))
        self.assertFalse(matches_terms(CHARMELEON, parse_search_query("4")))

    def test_each_type_is_an_independent_candidate(self) -> None:
        self.assertTrue(matches_terms(BULBASAUR, parse_search_query(":grass :poison")))
        self.assertFalse(matches_terms(BULBASAUR, parse_search_query(":grass :fire")))

    def test_name_terms_do_not_search_abilities(self) -> None:
        self.assertFalse(matches_terms(PIKACHU, parse_search_query("static")))
        self.assertTrue(matches_terms(PIKACHU, parse_search_query("::static")))


class TestComputeMatchScores(unittest.TestCase):
    def test_groups_are_scored_separately(self) -> None:
        scores = compute_match_scores(BULBASAUR, parse_search_query("bulba :poison ::chloro"))

        self.assertEqual(scores, MatchScore(name_score=2, type_score=0, ability_score=2))
        self.assertTrue(scores.is_match)
        self.assertEqual(scores.total, 4)

    def test_terms_in_a_group_are_summed(self) -> None:
        scores = compute_match_scores(CHARMELEON, parse_search_query("char meleon"))

        self.assertEqual(scores.name_score, 2 + 14)

    def test_unmatched_term_gives_infinite_component(self) -> None:
        scores = compute_match_scores(CHARMANDER, parse_search_query(":water"))

        self.assertTrue(math.isinf(scores.type_score))
        self.assertEqual(scores.name_score, 0)
        self.assertFalse(scores.is_match)


class TestRelevanceScore(unittest.TestCase):
    def test_single_box_query_uses_whole_record_score(self) -> None:
        # "grass" is not a name term match, but the whole-record score sees types.
        parsed = parse_search_query("bulba grass")

        self.assertEqual(relevance_score(BULBASAUR, parsed), 2 + 2)

    def test_prefixed_query_sums_group_scores(self) -> None:
        parsed = parse_search_query("bulba :poison ::chloro")

        self.assertEqual(relevance_score(BULBASAUR, parsed), 4)

    def test_empty_query_is_neutral(self) -> None:
        self.assertEqual(relevance_score(PIKACHU, ParsedQuery()), 0)


class TestSortRecords(unittest.TestCase):
    def test_alphabetic(self) -> None:
        self.assertEqual(
            names(sort_records(ALL_RECORDS, "alphabetic")),
            ["bulbasaur", "charmander", "charmeleon", "pichar", "pikachu"],
        )
        self.assertEqual(
            names(sort_records(ALL_RECORDS, "alphabetic-reverse")),
            ["pikachu", "pichar", "charmeleon", "charmander", "bulbasaur"],
        )

    def test_ability_count_ties_fall_back_to_name(self) -> None:
        self.assertEqual(
            names(sort_records(ALL_RECORDS, "abilities")),
            ["bulbasaur", "charmander", "pikachu", "charmeleon", "pichar"],
        )
        self.assertEqual(
            names(sort_records(ALL_RECORDS, "abilities-reverse")),
            ["charmeleon", "pichar", "bulbasaur", "charmander", "pikachu"],
        )

    def test_by_id(self) -> None:
        self.assertEqual([p.id for p in sort_records(ALL_RECORDS, "oldest")], [1, 4, 5, 25, 999])
        self.assertEqual([p.id for p in sort_records(ALL_RECORDS, "newest")], [999, 25, 5, 4, 1])

    def test_unknown_sort_key(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown sort key"):
            sort_records(ALL_RECORDS, "by-weight")


class TestSearch(unittest.TestCase):
    def test_type_query_excludes_non_matching(self) -> None:
        results = search([BULBASAUR, CHARMANDER], SearchRequest(query=":fire"))

        self.assertEqual(results, [CHARMANDER])

    def test_prefix_match_outranks_inner_substring(self) -> None:
        results = search(ALL_RECORDS, SearchRequest(query="char"))

        self.assertEqual(names(results), ["charmander", "charmeleon", "pichar"])
        self.assertNotIn(BULBASAUR, results)

    def test_relevance_ties_use_explicit_sort(self) -> None:
        results = search(ALL_RECORDS, SearchRequest(query="char", sort_key="newest"))

        self.assertEqual(names(results), ["charmeleon", "charmander", "pichar"])

    def test_empty_query_uses_explicit_sort_only(self) -> None:
        results = search(ALL_RECORDS, SearchRequest(sort_key="oldest"))

        self.assertEqual([p.id for p in results], [1, 4, 5, 25, 999])

    def test_type_filter_is_applied_before_ranking(self) -> None:
        results = search(ALL_RECORDS, SearchRequest(type_filter="electric", query="pi"))

        self.assertEqual(names(results), ["pichar", "pikachu"])

        results = search(ALL_RECORDS, SearchRequest(type_filter="fire"))
        self.assertEqual(names(results), ["charmander", "charmeleon"])

    def test_type_filter_ignores_case(self) -> None:
        results = search(ALL_RECORDS, SearchRequest(type_filter="Fire"))
        self.assertEqual(names(results), ["charmander", "charmeleon"])

        results = search(ALL_RECORDS, SearchRequest(type_filter="ALL"))
        self.assertEqual(len(results), len(ALL_RECORDS))

    def test_tighter_subsequence_ranks_first(self) -> None:
        results = search(ALL_RECORDS, SearchRequest(query="pc"))

        # pichar: p@0 c@2 -> 101; pikachu: p@0 c@4 -> 103.
        self.assertEqual(names(results), ["pichar", "pikachu"])

    def test_ability_query(self) -> None:
        results = search(ALL_RECORDS, SearchRequest(query="::static", sort_key="oldest"))

        self.assertEqual(names(results), ["pikachu", "pichar"])

    def test_no_results(self) -> None:
        self.assertEqual(search(ALL_RECORDS, SearchRequest(query="zzz")), [])

    def test_repeated_search_is_deterministic(self) -> None:
        request = SearchRequest(sort_key="abilities", query="a")
        first = search(ALL_RECORDS, request)
        second = search(list(reversed(ALL_RECORDS)), request)

        self.assertEqual(first, second)
        self.assertEqual(first, search(ALL_RECORDS, request))


if __name__ == "__main__":
    unittest.main()
