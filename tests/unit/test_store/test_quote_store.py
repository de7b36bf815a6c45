"""
Unit tests for quote store operations
"""

import random

import pytest

from store import Quote, QuoteStore, DEFAULT_QUOTES
from utils import ValidationError, ErrorCodes, UnifiedConfigManager


@pytest.mark.unit
class TestQuoteStoreQueries:
    """Test cases for QuoteStore lookups"""

    def test_find_by_id_every_quote(self, quote_store, sample_quotes):
        for quote in sample_quotes:
            assert quote_store.find_by_id(str(quote.id)) == quote
            assert quote_store.find_by_id(quote.id) == quote

    def test_find_by_id_missing(self, quote_store):
        assert quote_store.find_by_id("999") is None

    @pytest.mark.parametrize("raw_id", ["abc", "", None, "x10", "\u0661\u0660", "1_0"])
    def test_find_by_id_unparseable(self, quote_store, raw_id):
        assert quote_store.find_by_id(raw_id) is None

    @pytest.mark.parametrize("raw_id, expected_id", [
        ("10abc", 10),
        ("20.5", 20),
        ("  30", 30),
        ("+40", 40),
        ("010", 10),
    ])
    def test_find_by_id_uses_leading_integer(self, quote_store, raw_id, expected_id):
        assert quote_store.find_by_id(raw_id).id == expected_id

    def test_filter_by_category(self, quote_store):
        result = quote_store.filter_by_category("software")
        assert [q.id for q in result] == [10, 30]

    def test_filter_by_category_is_case_sensitive(self, quote_store):
        assert quote_store.filter_by_category("Software") == []

    def test_filter_by_unknown_category(self, quote_store):
        assert quote_store.filter_by_category("doesnotexist") == []

    def test_random_quote_membership(self, quote_store, sample_quotes):
        for _ in range(50):
            assert quote_store.random_quote() in sample_quotes

    def test_random_quote_reaches_every_quote(self, quote_store, sample_quotes):
        seen = {quote_store.random_quote().id for _ in range(500)}
        assert seen == {q.id for q in sample_quotes}

    def test_random_quote_in_category(self, quote_store):
        seen = set()
        for _ in range(200):
            quote = quote_store.random_quote("software")
            assert quote.category == "software"
            seen.add(quote.id)
        assert seen == {10, 30}

    def test_random_quote_unknown_category(self, quote_store):
        assert quote_store.random_quote("doesnotexist") is None

    def test_random_quote_empty_store(self):
        assert QuoteStore(()).random_quote() is None

    def test_seeded_random_is_reproducible(self, sample_quotes):
        first = QuoteStore(sample_quotes, rng=random.Random(3))
        second = QuoteStore(sample_quotes, rng=random.Random(3))
        assert [first.random_quote().id for _ in range(20)] == [second.random_quote().id for _ in range(20)]


@pytest.mark.unit
class TestQuoteStoreSelection:
    """Test cases for single-quote precedence and collection listing"""

    def test_id_takes_precedence_over_category(self, quote_store):
        quote = quote_store.select_quote(quote_id="20", category="software")
        assert quote.id == 20

    def test_unmatched_id_does_not_fall_back_to_category(self, quote_store):
        assert quote_store.select_quote(quote_id="999", category="software") is None

    def test_malformed_id_does_not_fall_back_to_category(self, quote_store):
        assert quote_store.select_quote(quote_id="abc", category="software") is None

    def test_empty_id_treated_as_absent(self, quote_store):
        quote = quote_store.select_quote(quote_id="", category="life")
        assert quote.id == 20

    def test_category_selection(self, quote_store):
        assert quote_store.select_quote(category="inspiration").id == 40

    def test_no_parameters_selects_from_full_set(self, quote_store, sample_quotes):
        assert quote_store.select_quote() in sample_quotes

    def test_list_quotes_full_set_in_order(self, quote_store, sample_quotes):
        assert quote_store.list_quotes() == list(sample_quotes)

    def test_list_quotes_is_stable(self, quote_store):
        assert quote_store.list_quotes() == quote_store.list_quotes()
        assert len(quote_store.list_quotes()) == len(quote_store)

    def test_list_quotes_by_category(self, quote_store):
        assert [q.id for q in quote_store.list_quotes("software")] == [10, 30]

    def test_list_quotes_unknown_category_is_empty(self, quote_store):
        assert quote_store.list_quotes("doesnotexist") == []

    def test_list_quotes_returns_copy(self, quote_store):
        listed = quote_store.list_quotes()
        listed.clear()
        assert len(quote_store.list_quotes()) == len(quote_store)


@pytest.mark.unit
class TestQuoteStoreLoading:
    """Test cases for building quote stores"""

    def test_default_store(self):
        store = QuoteStore()
        assert store.quotes == DEFAULT_QUOTES

    def test_duplicate_ids_rejected(self):
        quotes = [
            Quote(id=1, text="One.", author="A", category="x"),
            Quote(id=1, text="Two.", author="B", category="y"),
        ]
        with pytest.raises(ValidationError) as exc_info:
            QuoteStore(quotes)
        assert exc_info.value.error_code == ErrorCodes.VALIDATION_DUPLICATE_ID

    def test_from_file(self, write_json):
        path = write_json("quotes.json", [
            {"id": 5, "text": "Five.", "author": "E", "category": "numbers"},
            {"id": 6, "text": "Six.", "author": "F", "category": "numbers"},
        ])
        store = QuoteStore.from_file(path)
        assert [q.id for q in store.quotes] == [5, 6]

    def test_from_file_missing(self, temp_dir):
        with pytest.raises(ValidationError) as exc_info:
            QuoteStore.from_file(temp_dir / "missing.json")
        assert exc_info.value.error_code == ErrorCodes.VALIDATION_INVALID_FILE

    def test_from_file_malformed_json(self, write_json):
        path = write_json("quotes.json", "[{not json")
        with pytest.raises(ValidationError):
            QuoteStore.from_file(path)

    @pytest.mark.parametrize("payload", [[], {"id": 1}, "quotes"])
    def test_from_file_requires_non_empty_array(self, write_json, payload):
        path = write_json("quotes.json", payload)
        with pytest.raises(ValidationError) as exc_info:
            QuoteStore.from_file(path)
        assert exc_info.value.error_code == ErrorCodes.VALIDATION_INVALID_FILE

    def test_from_file_invalid_quote(self, write_json):
        path = write_json("quotes.json", [
            {"id": 1, "text": "Fine.", "author": "A", "category": "Upper"},
        ])
        with pytest.raises(ValidationError) as exc_info:
            QuoteStore.from_file(path)
        assert exc_info.value.error_code == ErrorCodes.VALIDATION_INVALID_QUOTE
        assert exc_info.value.context["index"] == 0

    def test_from_config_uses_builtin_set(self, write_json, temp_dir):
        write_json("config.json", {"quote_config": {"data_file": None}})
        store = QuoteStore.from_config(UnifiedConfigManager(temp_dir))
        assert store.quotes == DEFAULT_QUOTES

    def test_from_config_relative_data_file(self, write_json, temp_dir):
        write_json("quotes.data", [
            {"id": 8, "text": "Eight.", "author": "H", "category": "numbers"},
        ])
        write_json("config.json", {"quote_config": {"data_file": "quotes.data", "random_seed": 1}})
        store = QuoteStore.from_config(UnifiedConfigManager(temp_dir))
        assert [q.id for q in store.quotes] == [8]
        assert store.random_quote().id == 8
