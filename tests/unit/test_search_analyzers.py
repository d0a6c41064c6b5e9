"""Unit tests for normalization and tokenization."""

import pytest

from catalog_search.search.analyzers import is_blank, normalize, tokenize


@pytest.mark.unit
class TestNormalize:
    def test_trims_and_lowercases(self):
        assert normalize("  LAPTOP ") == "laptop"

    def test_keeps_inner_whitespace(self):
        assert normalize(" Laptop  Pro ") == "laptop  pro"

    def test_none_is_empty(self):
        assert normalize(None) == ""

    @pytest.mark.parametrize("text", ["", "   ", "Abc", "  MiXeD case\t", "ÄÖÜ straße", "abc-123"])
    def test_idempotent(self, text):
        assert normalize(normalize(text)) == normalize(text)


@pytest.mark.unit
class TestIsBlank:
    @pytest.mark.parametrize("text", [None, "", " ", "\t\n "])
    def test_blank_values(self, text):
        assert is_blank(text)

    def test_text_is_not_blank(self):
        assert not is_blank(" x ")


@pytest.mark.unit
class TestTokenize:
    def test_splits_on_punctuation(self):
        assert list(tokenize("ltp-014-pro")) == ["ltp", "014", "pro"]

    def test_splits_on_whitespace(self):
        assert list(tokenize("laptop pro 14")) == ["laptop", "pro", "14"]

    def test_underscore_is_a_separator(self):
        assert list(tokenize("usb_c")) == ["usb", "c"]

    def test_separators_never_emitted(self):
        tokens = list(tokenize("--a,,b!! c--"))
        assert tokens == ["a", "b", "c"]
        assert all(token.isalnum() for token in tokens)

    def test_non_ascii_letters(self):
        assert list(tokenize("café crème")) == ["café", "crème"]

    def test_empty_and_separator_only(self):
        assert list(tokenize("")) == []
        assert list(tokenize(" -_/ ")) == []

    def test_non_decimal_numerics_are_separators(self):
        assert list(tokenize("x²y")) == ["x", "y"]
        assert list(tokenize("½ cup")) == ["cup"]
        assert list(tokenize("Ⅻ")) == []

    def test_decimal_digits_from_other_scripts(self):
        assert list(tokenize("model ٣٤")) == ["model", "٣٤"]
