import logging

import pytest

from services.compare import InputTooLarge, compare_texts, max_input_units

def test_compare_graphemes():
    res = compare_texts("x² + y²", "y² + z²")
    assert res["similarity"] == 0.7142857142857143
    assert res["matched"] == 5
    assert (res["lengthA"], res["lengthB"]) == (7, 7)
    assert res["matchesA"] == [(1, 4), (6, 1)]
    assert res["matchesB"] == [(1, 4), (6, 1)]

def test_compare_units_differ():
    g = compare_texts("cafe\u0301", "cafe")
    c = compare_texts("cafe\u0301", "cafe", unit="char")
    assert g["similarity"] == 0.75
    assert c["similarity"] == 8 / 9
    assert g["matchesA"] == [(0, 3)]

def test_compare_words():
    res = compare_texts("The cat sat on the mat.", "the cat lay on the mat", unit="word")
    assert res["matched"] == 4
    assert res["matchesA"] == [(4, 3), (12, 10)]

def test_compare_empty():
    res = compare_texts("", "")
    assert res["similarity"] == 0.0
    assert res["matchesA"] == [] and res["matchesB"] == []

def test_compare_size_limit(monkeypatch):
    with pytest.raises(InputTooLarge) as ei:
        compare_texts("abcdef", "abc", max_units=5)
    assert ei.value.side == "A" and ei.value.count == 6
    monkeypatch.setenv("MAX_INPUT_UNITS", "2")
    with pytest.raises(InputTooLarge):
        compare_texts("ab", "abc")

def test_default_size_limit(monkeypatch):
    monkeypatch.delenv("MAX_INPUT_UNITS", raising=False)
    assert max_input_units() == 1000
    assert compare_texts("a" * 1000, "b")["lengthA"] == 1000
    with pytest.raises(InputTooLarge) as ei:
        compare_texts("b", "a" * 1001)
    assert ei.value.side == "B" and ei.value.limit == 1000

def test_compare_logs_once(caplog):
    with caplog.at_level(logging.DEBUG):
        compare_texts("Wikimedia", "Wikimania")
    assert [r.levelname for r in caplog.records if r.name == "services.compare"] == ["INFO"]
