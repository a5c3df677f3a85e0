"""
Tests for list value tokenizing.

Usage:
    pytest tests/test_tokenizer.py -v
"""

from envconfig.tokenizer import iter_tokens, split_tokens


class TestSplitTokens:
    """Test split_tokens()."""

    def test_plain(self):
        assert split_tokens("1,2,3") == ["1", "2", "3"]

    def test_single(self):
        assert split_tokens("abc") == ["abc"]

    def test_parenthesized_groups(self):
        assert split_tokens("(a,1),(b,2)") == ["(a,1)", "(b,2)"]

    def test_nested_groups(self):
        assert split_tokens("(a,(b,c)),d") == ["(a,(b,c))", "d"]

    def test_empty_tokens_kept(self):
        assert split_tokens("a,,b") == ["a", "", "b"]

    def test_no_trimming(self):
        assert split_tokens("a, b") == ["a", " b"]

    def test_iter_matches_split(self):
        assert list(iter_tokens("(a,1),b")) == split_tokens("(a,1),b")
