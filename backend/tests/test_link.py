from __future__ import annotations

import pytest

from languages import Language, field_for, target_for, word_for
from conftest import make_entry
from services.link import FORCE_OFFLINE_KEY, Connectivity, LinkSettings, link_active
from services.local_storage import LocalStorage


def test_force_offline_round_trips_through_storage(storage):
    settings = LinkSettings.load(storage)
    assert settings.force_offline is False

    settings.set_force_offline(True)
    assert storage.get_item(FORCE_OFFLINE_KEY) == "true"
    assert LinkSettings.load(LocalStorage(storage.path)).force_offline is True


@pytest.mark.parametrize(
    "online,force_offline,expected",
    [(True, False, True), (True, True, False), (False, False, False), (False, True, False)],
)
def test_link_active(storage, online, force_offline, expected):
    connectivity = Connectivity("localhost", 1, online=online)
    assert link_active(connectivity, LinkSettings(storage, force_offline)) is expected


def test_set_online_reports_transitions():
    connectivity = Connectivity("localhost", 1, online=False)
    assert connectivity.set_online(True) is True
    assert connectivity.set_online(True) is False


def test_language_field_mapping():
    entry = make_entry("evening", "onguloshi")
    assert field_for(Language.ENGLISH) == "english_word"
    assert word_for(Language.OSHIDONGA, entry) == "onguloshi"
    assert target_for(Language.OSHIKWANYAMA) == Language.ENGLISH
    assert target_for("english") == Language.OSHIKWANYAMA
    with pytest.raises(LookupError):
        field_for("latin")


def test_local_storage_ignores_corrupt_file(tmp_path):
    path = tmp_path / "local_storage.json"
    path.write_text("[1, 2", encoding="utf-8")
    storage = LocalStorage(path)
    assert storage.get_item("anything") is None

    storage.set_item("k", "v")
    storage.remove_item("k")
    assert LocalStorage(path).get_item("k") is None
