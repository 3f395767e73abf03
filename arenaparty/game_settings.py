"""The settings panel opened from inside a running match."""

from __future__ import annotations

from arenaparty.audio import AudioMixer
from arenaparty.i18n import Translations
from arenaparty.settings import (
    CLICK_EFFECT,
    ENTER_EFFECT,
    PLAY_MUSIC_KEY,
    SHOW_FPS_KEY,
    VOLUME_KEY,
    SettingsPanel,
)
from arenaparty.userdata import UserDefaults, record_game_over

MATCH_MUSIC = "music/retro_fight_ingame_01.mp3"

# In a match the slider drives the music twice as hard as in the main menu.
_MATCH_VOLUME_FACTOR = 2


class GameSettingsPanel(SettingsPanel):
    """Volume, music and frame-counter controls, plus leaving the match."""

    def __init__(self, store: UserDefaults, audio: AudioMixer, translations: Translations) -> None:
        self.store = store
        self.audio = audio
        self.translations = translations

        self.audio.preload_background_music(MATCH_MUSIC)
        self.audio.play_effect(ENTER_EFFECT)
        self.audio.set_effects_volume_from(store, VOLUME_KEY)

        self.volume_label = translations.text("VOLUME SETTING")

        self.music_enabled = store.get_bool(PLAY_MUSIC_KEY, True)
        self.music_state_text = translations.text("MUSIC ON" if self.music_enabled else "MUSIC OFF")

        self.fps_visible = store.get_bool(SHOW_FPS_KEY, True)
        self.fps_state_text = translations.text("DISPLAY FPS" if self.fps_visible else "CONCEAL FPS")

        self.percentage_text = self.volume_text()

    def on_volume_changed(self, percent: int) -> str:
        """Apply a new slider position and return the text to display."""
        percent = int(percent)
        self.audio.set_background_music_volume(_MATCH_VOLUME_FACTOR * percent / 100)
        self.store.set_int(VOLUME_KEY, percent)
        self.percentage_text = f"{percent}%"
        return self.percentage_text

    def end_game(self) -> None:
        """Leave the match, recording its result in the career statistics."""
        self.audio.play_effect(CLICK_EFFECT)
        self.audio.set_effects_volume_from(self.store, VOLUME_KEY)
        record_game_over(self.store)