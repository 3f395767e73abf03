import pytest

from arenaparty.audio import AudioMixer
from arenaparty.i18n import Language, Translations
from arenaparty.settings import CLICK_EFFECT, ENTER_EFFECT, MENU_MUSIC, SettingsPanel
from arenaparty.userdata import UserDefaults

TEXTS = {
    "VOLUME SETTING": "VOLUME SETTING",
    "Clear": "Clear",
    "Data": "Data",
    "MUSIC ON": "MUSIC ON",
    "MUSIC OFF": "MUSIC OFF",
    "DISPLAY FPS": "DISPLAY FPS",
    "CONCEAL FPS": "CONCEAL FPS",
}


def make_panel(store=None, audio=None):
    store = store if store is not None else UserDefaults()
    audio = audio if audio is not None else AudioMixer()
    return SettingsPanel(store, audio, Translations(dict(TEXTS))), store, audio


def test_entering_plays_scene_effect():
    panel, _, audio = make_panel()
    assert audio.played_effects[0].path == ENTER_EFFECT
    assert panel.clear_data_label == "Clear\nData"


def test_defaults_show_music_and_fps_on():
    panel, _, _ = make_panel()
    assert panel.music_state_text == "MUSIC ON"
    assert panel.fps_state_text == "DISPLAY FPS"


def test_stored_flags_are_reflected():
    store = UserDefaults()
    store.set_bool("ifPlayMusic", False)
    store.set_bool("ifShowFPS", False)
    panel, _, _ = make_panel(store)
    assert panel.music_state_text == "MUSIC OFF"
    assert panel.fps_state_text == "CONCEAL FPS"


def test_volume_change_round_trip():
    panel, store, audio = make_panel()
    text = panel.on_volume_changed(40)
    assert text == "40%"
    assert store.get_int("musicVolume") == 40
    assert panel.volume_text() == text
    assert audio.background_volume == pytest.approx(0.4)


def test_toggle_music_pauses_and_resumes():
    audio = AudioMixer()
    audio.play_background_music("music/theme.mp3", loop=True)
    panel, store, _ = make_panel(audio=audio)
    assert panel.toggle_music() is False
    assert audio.is_background_music_playing() is False
    assert store.get_bool("ifPlayMusic", True) is False
    assert panel.music_state_text == "MUSIC OFF"
    assert MENU_MUSIC in audio.preloaded_music
    assert panel.toggle_music() is True
    assert audio.is_background_music_playing() is True
    assert store.get_bool("ifPlayMusic", False) is True
    assert panel.music_state_text == "MUSIC ON"


def test_toggle_fps_flips_state():
    panel, store, audio = make_panel()
    assert panel.toggle_fps() is False
    assert store.get_bool("ifShowFPS", True) is False
    assert panel.fps_state_text == "CONCEAL FPS"
    assert audio.played_effects[-1].path == CLICK_EFFECT
    assert panel.toggle_fps() is True
    assert panel.fps_state_text == "DISPLAY FPS"


def test_clear_user_data_resets_statistics_and_hero():
    store = UserDefaults()
    for key in ("_winTimes", "_gameTimes", "_killNums", "_cupNums"):
        store.set_int(key, 7)
    store.set_int("selectedHero", 3)
    panel, _, _ = make_panel(store)
    panel.clear_user_data()
    assert [store.get_int(k) for k in ("_winTimes", "_gameTimes", "_killNums", "_cupNums")] == [0, 0, 0, 0]
    assert store.get_int("selectedHero") == 1


def test_clear_user_data_leaves_unset_hero_alone():
    panel, store, _ = make_panel()
    panel.clear_user_data()
    assert "selectedHero" not in store
    assert "_winTimes" not in store


def test_choose_language_stores_code():
    panel, store, _ = make_panel()
    assert panel.choose_language(Language.CHINESE) is Language.CHINESE
    assert store.get_int("language") == Language.CHINESE
    assert panel.choose_language(0) is Language.ENGLISH
    assert store.get_int("language") == Language.ENGLISH


def test_choose_unknown_language_raises():
    panel, store, _ = make_panel()
    with pytest.raises(ValueError):
        panel.choose_language(9)
    assert "language" not in store


def test_missing_translation_raises():
    with pytest.raises(KeyError):
        SettingsPanel(UserDefaults(), AudioMixer(), Translations({}))