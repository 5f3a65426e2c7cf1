import pytest
from contextsearch import TextSearcher, build

FENCE = "The dog jumped over the fence. The dog barked."


def test_one_word_of_context_on_each_side():
    s = build(FENCE)
    assert s.search("dog", 1) == ["The dog jumped", "The dog barked"]


def test_context_keeps_original_delimiters():
    s = build(FENCE)
    assert s.search("dog", 2) == [
        "The dog jumped over",
        "fence. The dog barked.",
    ]


def test_substring_and_case_insensitive_match():
    s = build(FENCE)
    assert s.search("do", 0) == ["dog", "dog"]
    assert s.search("DOG", 0) == ["dog", "dog"]
    s2 = build("concatenate the cats, Cat!")
    assert s2.search("cat", 0) == ["concatenate", "cats", "Cat"]


def test_casefold_match_keeps_original_casing():
    s = build("Die Straße ist lang")
    assert s.search("STRASSE", 1) == ["Die Straße ist"]


def test_zero_context_returns_matched_token_only():
    s = build("Alpha beta, gamma.\nBeta delta")
    assert s.search("beta", 0) == ["beta", "Beta"]


def test_no_match_and_empty_query_return_empty_list():
    s = build(FENCE)
    assert s.search("cat", 3) == []
    assert s.search("", 3) == []
    assert s.search("dog ", 1) == []  # delimiters never live inside a word token


def test_empty_text_is_searchable():
    s = build("")
    assert len(s) == 0
    assert s.search("anything", 2) == []


def test_boundaries_return_what_is_available():
    s = build("dog runs fast")
    assert s.search("dog", 5) == ["dog runs fast"]
    assert s.search("fast", 5) == ["dog runs fast"]
    assert s.search("runs", 10) == ["dog runs fast"]


def test_results_follow_text_order_without_dedup():
    s = build("cat cat. Cat")
    assert s.search("cat", 0) == ["cat", "cat", "Cat"]
    m = s.search_matches("cat", 0)
    assert [r.position for r in m] == sorted(r.position for r in m)


def test_one_result_per_token_even_with_repeated_substring():
    s = build("banana split")
    assert s.search("an", 0) == ["banana"]


def test_hyphen_and_period_are_delimiters_not_words():
    s = build("a well-known fact. Next")
    assert s.search("known", 1) == ["well-known fact"]
    assert s.search("fact", 1) == ["known fact. Next"]


def test_idempotent_calls():
    s = build(FENCE)
    assert s.search("the", 2) == s.search("the", 2)


def test_trailing_sanitization_policy():
    text = "one two three,\n"
    assert build(text).search("three", 1) == ["two three,\n"]
    assert build(text, strip_trailing=True).search("three", 1) == ["two three"]


def test_match_details():
    s = build(FENCE)
    first = s.search_matches("dog", 1)[0]
    assert first.before == "The "
    assert first.match == "dog"
    assert first.after == " jumped"
    assert FENCE[first.offset:first.offset + 3] == "dog"
    assert first.to_dict()["text"] == "The dog jumped"


@pytest.mark.parametrize("bad", [-1, -10, 1.5, "2", True, None])
def test_invalid_context_words_rejected(bad):
    s = build(FENCE)
    with pytest.raises(ValueError):
        s.search("dog", bad)


def test_non_string_query_rejected():
    with pytest.raises(TypeError):
        build(FENCE).search(None, 1)


def test_non_string_text_rejected():
    with pytest.raises(TypeError):
        TextSearcher(b"bytes are not text")
