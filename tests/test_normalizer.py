import pytest
from normalizer import normalize_code


class TestNormalizeCode:
    def test_canonical(self):
        assert normalize_code("CS200") == "CS200"

    def test_lowercase(self):
        assert normalize_code("cs200") == "CS200"

    def test_hyphen(self):
        assert normalize_code("cs-200") == "CS200"

    def test_space(self):
        assert normalize_code("CS 200") == "CS200"

    def test_underscore(self):
        assert normalize_code("cs_200") == "CS200"

    def test_comma(self):
        assert normalize_code("CS,200") == "CS200"

    def test_surrounding_whitespace(self):
        assert normalize_code("  csci 200 \t") == "CSCI200"

    def test_mixed_separators(self):
        assert normalize_code(" c s - _ 2 0 0 ") == "CS200"

    def test_all_spellings_agree(self):
        assert normalize_code("cs-200") == normalize_code("CS 200") == normalize_code("cs_200") == "CS200"

    def test_other_punctuation_kept(self):
        assert normalize_code("cs.200") == "CS.200"

    def test_empty(self):
        assert normalize_code("") == ""

    def test_none(self):
        assert normalize_code(None) == ""

    def test_separators_only(self):
        assert normalize_code(" -_, ") == ""

    @pytest.mark.parametrize("raw", ["cs-200", "  Math 201 ", "a_b,c-d e", "", "x\ty\nz", "CSCI300"])
    def test_idempotent(self, raw):
        once = normalize_code(raw)
        assert normalize_code(once) == once
