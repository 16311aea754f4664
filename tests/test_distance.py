from release_search.distance import levenshtein, within_distance


def test_levenshtein_base_cases() -> None:
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("", "") == 0


def test_levenshtein_classic_examples() -> None:
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("bleach", "beach") == 1
    assert levenshtein("titan", "titan") == 0


def test_levenshtein_is_symmetric() -> None:
    pairs = [("flaw", "lawn"), ("frieren", "frieran"), ("mha", "the"), ("a", "xyz")]
    for a, b in pairs:
        assert levenshtein(a, b) == levenshtein(b, a)


def test_levenshtein_returns_plain_int() -> None:
    assert type(levenshtein("abc", "abd")) is int


def test_within_distance_respects_bound() -> None:
    assert within_distance("bleach", "beach", 2)
    assert within_distance("my", "mha", 2)
    assert not within_distance("kitten", "sitting", 2)


def test_within_distance_skips_long_tokens() -> None:
    long_token = "a" * 70
    assert not within_distance(long_token, long_token, 2, max_token_length=64)
    assert within_distance(long_token, long_token, 2, max_token_length=80)


def test_within_distance_length_gap_short_circuit() -> None:
    assert not within_distance("ab", "abcdef", 2)
    assert not within_distance("ab", "ab", -1)
