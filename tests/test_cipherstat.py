import math

import pytest

from cipherstat import (
    DEFAULT_TABLES,
    FLOOR_LOG_PROB,
    LanguageTables,
    NGramModel,
    UnsupportedLanguageWarning,
    adjacency_ratio,
    as_text,
    best_caesar_shift,
    chi_squared,
    chi_squared_letters,
    digraph_ic,
    index_of_coincidence,
    letter_fit_p_value,
    letter_frequencies,
    ngram_counts,
    ngram_naturalness,
    only_letters,
    shannon_entropy,
    shape_score,
    shift_letters,
)


class TestNormalization:
    def test_strips_to_uppercase_letters(self):
        assert only_letters("Hello, World! 123") == "HELLOWORLD"

    def test_folds_accents(self):
        assert only_letters("Déjà vu, señor") == "DEJAVUSENOR"

    def test_total_on_odd_input(self):
        assert only_letters(None) == ""
        assert only_letters("") == ""
        assert only_letters(12345) == ""
        assert only_letters("Все") == ""

    def test_bytes_are_decoded(self):
        assert as_text(b"caf\xc3\xa9") == "café"
        assert only_letters(b"HELLO WORLD") == "HELLOWORLD"
        assert only_letters(b"\xff ok") == "OK"

    def test_letter_frequencies_sum_to_100(self, plaintext):
        assert sum(letter_frequencies(plaintext).values()) == pytest.approx(100.0)

    def test_ngram_counts(self):
        assert ngram_counts("ABAB", 2) == {"AB": 2, "BA": 1}

    def test_ngram_counts_rejects_zero_order(self):
        with pytest.raises(ValueError):
            ngram_counts("ABC", 0)

    def test_shift_letters_wraps(self):
        assert shift_letters("xyz", 3) == "ABC"


class TestStats:
    def test_ic_short_text(self):
        assert index_of_coincidence("") == 0.0
        assert index_of_coincidence("A") == 0.0

    def test_ic_single_letter_repeated(self):
        assert index_of_coincidence("AAAA") == pytest.approx(26.0)

    def test_ic_english_range(self, military):
        assert 1.5 < index_of_coincidence(military) < 2.1

    def test_ic_shift_invariant(self, plaintext, caesar7):
        assert index_of_coincidence(caesar7) == pytest.approx(index_of_coincidence(plaintext))

    def test_entropy_bounds(self, noise):
        assert shannon_entropy("") == 0.0
        assert shannon_entropy("AAAA") == 0.0
        assert 4.0 < shannon_entropy(noise) <= math.log2(26)

    def test_chi_squared_missing_observed_counts_as_zero(self):
        assert chi_squared({}, {"A": 50.0, "B": 50.0}) == pytest.approx(100.0)

    def test_chi_squared_skips_zero_expected_without_floor(self):
        assert chi_squared({"Z": 10.0}, {"Z": 0.0}) == 0.0
        assert chi_squared({"Z": 10.0}, {"Z": 0.0}, floor=1.0) == pytest.approx(81.0)

    def test_chi_squared_letters_prefers_plaintext(self, plaintext, caesar7):
        assert chi_squared_letters(plaintext) < chi_squared_letters(caesar7)

    def test_p_value_separates_plaintext_from_noise(self, military, noise):
        assert letter_fit_p_value(military) > letter_fit_p_value(noise)
        assert letter_fit_p_value("") == 0.0

    def test_shape_score_ignores_letter_identity(self, plaintext, caesar7):
        expected = DEFAULT_TABLES.table("english", 1).entries
        assert shape_score(letter_frequencies(caesar7), expected) == pytest.approx(
            shape_score(letter_frequencies(plaintext), expected))

    def test_best_caesar_shift_recovers_key(self, caesar7):
        result = best_caesar_shift(caesar7)
        assert result["shift"] == 7
        assert len(result["scores"]) == 26
        assert result["chi_squared"] == min(result["scores"])

    def test_best_caesar_shift_empty(self):
        result = best_caesar_shift("")
        assert result["shift"] == 0
        assert math.isinf(result["chi_squared"])

    def test_digraph_ic(self):
        assert digraph_ic("AB") == 0.0
        assert digraph_ic("AAAA") == pytest.approx(676.0)

    def test_adjacency_survives_substitution(self, military):
        swapped = military.translate(str.maketrans("ETAO", "TEOA"))
        assert adjacency_ratio(swapped) == pytest.approx(adjacency_ratio(military))
        assert adjacency_ratio(military) > 1.5

    def test_adjacency_drops_under_transposition(self, military, columnar_cipher):
        assert adjacency_ratio(columnar_cipher) < 1.3
        assert adjacency_ratio("") == 0.0


class TestTables:
    def test_builtin_languages(self):
        assert set(DEFAULT_TABLES.languages) == {
            "english", "spanish", "french", "german", "italian", "portuguese", "russian", "chinese"}

    def test_tables_are_read_only(self):
        table = DEFAULT_TABLES.table("english", 1)
        with pytest.raises(TypeError):
            table.entries["E"] = 0.0

    def test_partial_table_coverage(self):
        assert 0.0 < DEFAULT_TABLES.table("english", 3).coverage < 1.0

    def test_resolve_auto_is_silent(self, recwarn):
        assert DEFAULT_TABLES.resolve("auto") == "english"
        assert DEFAULT_TABLES.resolve(None) == "english"
        assert not recwarn.list

    def test_resolve_unknown_warns(self):
        with pytest.warns(UnsupportedLanguageWarning):
            assert DEFAULT_TABLES.resolve("klingon") == "english"

    def test_resolve_case_insensitive(self):
        assert DEFAULT_TABLES.resolve(" French ") == "french"

    def test_rejects_bad_order(self):
        with pytest.raises(ValueError):
            LanguageTables({"english": {5: {"ABCDE": 1.0}}})

    def test_rejects_non_numeric_percentage(self):
        with pytest.raises(ValueError):
            LanguageTables({"english": {1: {"E": "twelve"}}})

    def test_rejects_missing_default(self):
        with pytest.raises(ValueError):
            LanguageTables({"french": {1: {"E": 14.7}}})

    def test_table_order_out_of_range(self):
        with pytest.raises(ValueError):
            DEFAULT_TABLES.table("english", 0)

    def test_json_round_trip(self, tmp_path):
        custom = LanguageTables({"english": {1: {"E": 12.0, "T": 9.0}, 2: {"TH": 3.5}}})
        path = tmp_path / "tables.json"
        custom.to_json(path)
        loaded = LanguageTables.from_json(path)
        assert loaded.table("english", 1).entries == {"E": 12.0, "T": 9.0}
        assert loaded.table("english", 2).get("TH") == 3.5

    def test_from_json_rejects_non_object(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError):
            LanguageTables.from_json(path)


class TestNGramModel:
    def test_log_probs_not_renormalized(self):
        model = NGramModel(DEFAULT_TABLES.table("english", 2))
        th = DEFAULT_TABLES.table("english", 2).get("TH")
        assert model.log_prob("TH") == pytest.approx(math.log10(th) - 2)
        assert model.log_prob("QZ") == FLOOR_LOG_PROB

    def test_short_text_full_penalty(self):
        model = DEFAULT_TABLES.model("english", 3)
        assert model.score("AB") == pytest.approx(2 * FLOOR_LOG_PROB)
        assert model.score("") == 0.0

    def test_plaintext_scores_higher(self, military, columnar_cipher):
        model = DEFAULT_TABLES.model("english", 3)
        assert model.score(military) > model.score(columnar_cipher)

    def test_naturalness_orders_plaintext_above_scrambles(self, military, columnar_cipher, noise):
        plain = ngram_naturalness(military)
        assert plain > 0.6
        assert plain > ngram_naturalness(columnar_cipher)
        assert plain > ngram_naturalness(noise)

    def test_naturalness_bounded(self, noise):
        assert 0.0 <= ngram_naturalness(noise) <= 1.0
        assert ngram_naturalness("A") == 0.0
