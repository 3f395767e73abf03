"""The main settings panel: volume, music, frame counter, language and data reset."""

from __future__ import annotations

from arenaparty.audio import AudioMixer
from arenaparty.i18n import Language, Translations
from arenaparty.userdata import UserDefaults

ENTER_EFFECT = "music/to_a_new_scene.mp3"
CLICK_EFFECT = "music/if_click_buttom_on_menu.mp3"
MENU_MUSIC = "music/first_music.mp3"

VOLUME_KEY = "musicVolume"
PLAY_MUSIC_KEY = "ifPlayMusic"
SHOW_FPS_KEY = "ifShowFPS"
LANGUAGE_KEY = "language"

_STATISTICS = ("_winTimes", "_gameTimes", "_killNums", "_cupNums")
_HERO_KEY = "selectedHero"
_DEFAULT_HERO = 1


class SettingsPanel:
    """State and actions behind the settings screen reached from the main menu."""

    def __init__(self, store: UserDefaults, audio: AudioMixer, translations: Translations) -> None:
        self.store = store
        self.audio = audio
        self.translations = translations

        self.audio.play_effect(ENTER_EFFECT)
        self.audio.set_effects_volume_from(store, VOLUME_KEY)

        self.volume_label = translations.text("VOLUME SETTING")
        self.clear_data_label = f"{translations.text('Clear')}\n{translations.text('Data')}"

        self.music_enabled = store.get_bool(PLAY_MUSIC_KEY, True)
        self.music_state_text = translations.text("MUSIC ON" if self.music_enabled else "MUSIC OFF")

        self.fps_visible = store.get_bool(SHOW_FPS_KEY, True)
        self.fps_state_text = translations.text("DISPLAY FPS" if self.fps_visible else "CONCEAL FPS")

        self.percentage_text = self.volume_text()

    def _click(self) -> None:
        self.audio.play_effect(CLICK_EFFECT)
        self.audio.set_effects_volume_from(self.store, VOLUME_KEY)

    def volume_text(self) -> str:
        """The stored volume as shown beside the slider, e.g. ``"40%"``."""
        return f"{self.store.get_int(VOLUME_KEY)}%"

    def on_volume_changed(self, percent: int) -> str:
        """Apply a new slider position and return the text to display."""
        percent = int(percent)
        self.audio.set_background_music_volume(percent / 100)
        self.store.set_int(VOLUME_KEY, percent)
        self.percentage_text = f"{percent}%"
        return self.percentage_text

    def toggle_music(self) -> bool:
        """Pause or resume the background music; return whether it is now on."""
        self.audio.play_effect(CLICK_EFFECT)
        self.audio.preload_background_music(MENU_MUSIC)
        self.audio.set_effects_volume_from(self.store, VOLUME_KEY)
        if self.audio.is_background_music_playing():
            self.audio.pause_background_music()
            self.music_enabled = False
            self.music_state_text = self.translations.text("MUSIC OFF")
        else:
            self.audio.resume_background_music()
            self.music_enabled = True
            self.music_state_text = self.translations.text("MUSIC ON")
        self.store.set_bool(PLAY_MUSIC_KEY, self.music_enabled)
        return self.music_enabled

    def toggle_fps(self) -> bool:
        """Show or hide the frame counter; return whether it is now shown."""
        self._click()
        self.fps_visible = not self.fps_visible
        self.store.set_bool(SHOW_FPS_KEY, self.fps_visible)
        self.fps_state_text = self.translations.text("DISPLAY FPS" if self.fps_visible else "CONCEAL FPS")
        return self.fps_visible

    def clear_user_data(self) -> None:
        """Reset career statistics and the chosen hero."""
        self._click()
        for key in _STATISTICS:
            if self.store.get_int(key):
                self.store.set_int(key, 0)
        if self.store.get_int(_HERO_KEY):
            self.store.set_int(_HERO_KEY, _DEFAULT_HERO)

    def choose_language(self, language: int) -> Language:
        """Store the interface language; the caller reloads the translations."""
        chosen = Language(language)
        self.store.set_int(LANGUAGE_KEY, chosen)
        return chosen