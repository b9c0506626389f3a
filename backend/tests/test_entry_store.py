from __future__ import annotations

from conftest import make_entry
from languages import Language
from services.entry_store import VAULT_CACHE_KEY, EntryStore


def test_load_all_is_empty_without_snapshot(store):
    assert store.load_all() == []


def test_prepend_keeps_hundred_most_recent_newest_first(store):
    for i in range(101):
        store.prepend(make_entry(f"word{i}", f"oshitya{i}"))

    entries = store.load_all()
    assert len(entries) == 100
    assert entries[0].english_word == "word100"
    assert entries[-1].english_word == "word1"
    assert all(e.english_word != "word0" for e in entries)


def test_prepend_honours_explicit_cap(store):
    for i in range(5):
        store.prepend(make_entry(f"w{i}", f"o{i}"), cap=3)
    assert [e.english_word for e in store.load_all()] == ["w4", "w3", "w2"]


def test_prepend_replaces_older_copy_of_same_word(store):
    store.prepend(make_entry("evening", "ongulohi"))
    store.prepend(make_entry("water", "omeva"))
    store.prepend(make_entry("Evening", "onguloshi"))

    entries = store.load_all()
    assert [e.english_word for e in entries] == ["Evening", "water"]
    assert entries[0].oshikwanyama_word == "onguloshi"


def test_snapshot_survives_reload(storage):
    EntryStore(storage).prepend(make_entry("evening", "onguloshi", detected_dialect="oshikwanyama"))

    reloaded = EntryStore(type(storage)(storage.path))
    entries = reloaded.load_all()
    assert len(entries) == 1
    assert entries[0].detected_dialect == "oshikwanyama"


def test_replace_all_overwrites_snapshot(store):
    store.prepend(make_entry("evening", "onguloshi"))
    store.replace_all([make_entry("water", "omeva"), make_entry("dog", "ombwa")])
    assert [e.english_word for e in store.load_all()] == ["water", "dog"]


def test_corrupt_snapshot_reads_as_empty(storage):
    storage.set_item(VAULT_CACHE_KEY, "{not json")
    assert EntryStore(storage).load_all() == []


def test_find_exact_uses_field_for_language(store):
    store.replace_all([make_entry("Evening", "Onguloshi")])

    assert store.find_exact("  evening ", Language.ENGLISH).oshikwanyama_word == "Onguloshi"
    assert store.find_exact("onguloshi", Language.OSHIKWANYAMA).english_word == "Evening"
    assert store.find_exact("onguloshi", Language.ENGLISH) is None
    assert store.find_exact("evening", Language.OSHIKWANYAMA) is None


def test_find_fuzzy_matches_in_both_directions(store):
    store.replace_all([make_entry("evening(ish)", "onguloshi"), make_entry("dog", "ombwa")])

    assert store.find_fuzzy("evening", Language.ENGLISH).english_word == "evening(ish)"
    assert store.find_fuzzy("big dog", Language.ENGLISH).english_word == "dog"
    assert store.find_fuzzy("cat", Language.ENGLISH) is None
    assert store.find_fuzzy("", Language.ENGLISH) is None


def test_find_fuzzy_returns_first_match(store):
    store.replace_all([make_entry("good evening", "a"), make_entry("evening", "b")])
    assert store.find_fuzzy("evening", Language.ENGLISH).oshikwanyama_word == "a"
