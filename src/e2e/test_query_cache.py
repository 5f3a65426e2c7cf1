from concurrent.futures import ThreadPoolExecutor

from contextsearch import build

TEXT = (
    "It was the best of times, it was the worst of times, "
    "it was the age of wisdom, it was the age of foolishness."
)


def test_cached_results_match_uncached_for_every_width():
    cached = build(TEXT)
    plain = build(TEXT, use_cache=False)
    cached.search("was", 1)  # populate with one width only
    for n in range(0, 8):
        assert cached.search("was", n) == plain.search("was", n)
        assert cached.search("WAS", n) == plain.search("was", n)


def test_hits_and_misses_are_counted():
    s = build(TEXT)
    s.search("age", 2)
    s.search("Age", 0)
    s.search("age", 5)
    info = s.cache_info()
    assert info.misses == 1
    assert info.hits == 2
    assert info.size == 1


def test_empty_query_does_not_touch_cache():
    s = build(TEXT)
    s.search("", 1)
    assert s.cache_info().size == 0


def test_disabled_cache_reports_nothing():
    s = build(TEXT, use_cache=False)
    s.search("times", 1)
    s.search("times", 1)
    assert s.cache_info().to_dict() == {"hits": 0, "misses": 0, "size": 0}


def test_positions_are_ascending_word_positions():
    s = build(TEXT)
    pos = s.match_positions("it")
    assert list(pos) == sorted(pos)
    assert all(s.tokens[p].is_word for p in pos)
    assert s.match_positions("it") is pos


def test_no_match_is_cached_too():
    s = build(TEXT)
    assert s.search("zebra", 2) == []
    assert s.search("zebra", 2) == []
    assert s.cache_info().hits == 1


def test_concurrent_queries_agree():
    s = build(TEXT * 50)
    expected = build(TEXT * 50, use_cache=False).search("of", 2)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: s.search("of", 2), range(32)))
    assert all(r == expected for r in results)
    assert s.cache_info().size == 1
