"""Shared test fixtures for wordchain tests."""

import pytest


# Small hand-built word lists whose search order is easy to trace.
LADDER_WORDS = frozenset({
    # cat -> cot -> cog -> dog
    "cat", "cot", "cog", "dog",
    # lead -> load -> goad -> gold
    "lead", "load", "goad", "gold",
    # ruby -> rube -> robe -> rode -> code
    "ruby", "rube", "robe", "rode", "code",
    # unrelated four-letter words
    "rust", "bode", "ride",
})

# The first direct move from "abc" leads into a detour of five words, while
# abc -> ayc -> ayz -> xyz needs only four.
DETOUR_WORDS = frozenset({"xbc", "xbq", "xyq", "ayc", "ayz"})


@pytest.fixture
def ladder_words():
    return LADDER_WORDS


@pytest.fixture
def detour_words():
    return DETOUR_WORDS


@pytest.fixture
def wordlist_file(tmp_path):
    """Write LADDER_WORDS to a word list file, with noise the loader must clean."""
    path = tmp_path / "words.txt"
    lines = sorted(LADDER_WORDS)
    lines[0] = "  " + lines[0].upper() + "  "
    path.write_text("\n".join(lines[:5]) + "\n\n" + "\n".join(lines[5:]) + "\n")
    return path
