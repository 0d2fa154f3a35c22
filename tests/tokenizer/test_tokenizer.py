"""
Tests for Tokenizer and TokenSplitter.

Tests cover:
1. Tokenization and detokenization
2. Token-window splitting with overlap
3. TokenSplitter as an embedding function splitter
"""

import pytest

from chunkembed.config import TokenizerConfig
from chunkembed.core.embeddings.validation import is_callable
from chunkembed.core.tokenizer import Tokenizer, TokenSplitter
from chunkembed.utils.exceptions import ValidationError


@pytest.fixture
def approximate_tokenizer():
    """Tokenizer with one character per token for predictable windows."""
    return Tokenizer(TokenizerConfig(provider="approximate", chars_per_token=1.0))


class TestTokenization:
    """Tests for tokenize and detokenize."""

    def test_round_trip(self):
        tokenizer = Tokenizer()
        text = "Chunks are embedded in batches."
        assert tokenizer.detokenize(tokenizer.tokenize(text)) == text

    def test_empty(self):
        tokenizer = Tokenizer()
        assert tokenizer.tokenize("") == []
        assert tokenizer.detokenize([]) == ""

    def test_encoder_is_cached(self):
        tokenizer = Tokenizer()
        assert tokenizer.encoder is tokenizer.encoder


class TestSplit:
    """Tests for token-window splitting."""

    def test_split_without_overlap(self, approximate_tokenizer):
        assert approximate_tokenizer.split("abcdefghij", chunk_tokens=4) == ["abcd", "efgh", "ij"]

    def test_split_with_overlap(self, approximate_tokenizer):
        chunks = approximate_tokenizer.split("abcdefghij", chunk_tokens=4, chunk_overlap=1)
        assert chunks == ["abcd", "defg", "ghij"]

    def test_split_does_not_repeat_tail(self, approximate_tokenizer):
        chunks = approximate_tokenizer.split("abcd", chunk_tokens=4, chunk_overlap=2)
        assert chunks == ["abcd"]

    def test_split_short_text(self, approximate_tokenizer):
        assert approximate_tokenizer.split("ab", chunk_tokens=8) == ["ab"]

    def test_split_empty(self, approximate_tokenizer):
        assert approximate_tokenizer.split("", chunk_tokens=8) == []

    def test_split_scales_with_chars_per_token(self):
        tokenizer = Tokenizer(TokenizerConfig(provider="approximate", chars_per_token=2.0))
        assert tokenizer.split("abcdefgh", chunk_tokens=2) == ["abcd", "efgh"]

    def test_split_tiktoken(self):
        tokenizer = Tokenizer()
        text = "word " * 50
        chunks = tokenizer.split(text, chunk_tokens=10, chunk_overlap=2)

        assert len(chunks) > 1
        assert all(len(tokenizer.tokenize(chunk)) <= 10 for chunk in chunks)
        assert chunks[0] == tokenizer.detokenize(tokenizer.tokenize(text)[:10])

    @pytest.mark.parametrize(
        "chunk_tokens,chunk_overlap",
        [(0, 0), (-1, 0), (4, -1), (4, 4), (4, 5)],
    )
    def test_split_invalid_window(self, approximate_tokenizer, chunk_tokens, chunk_overlap):
        with pytest.raises(ValidationError):
            approximate_tokenizer.split("text", chunk_tokens, chunk_overlap)


class TestTokenSplitter:
    """Tests for the splitter callable."""

    def test_is_valid_splitter(self):
        assert is_callable(TokenSplitter()) is True

    def test_call(self, approximate_tokenizer):
        splitter = TokenSplitter(chunk_tokens=3, chunk_overlap=1, tokenizer=approximate_tokenizer)
        assert splitter("abcdefg") == ["abc", "cde", "efg"]

    def test_invalid_window(self):
        with pytest.raises(ValidationError, match="chunk_overlap"):
            TokenSplitter(chunk_tokens=4, chunk_overlap=4)

    def test_repr(self):
        assert repr(TokenSplitter(8, 2)) == "TokenSplitter(chunk_tokens=8, chunk_overlap=2)"
