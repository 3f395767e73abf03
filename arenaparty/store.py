"""The store screen: opponent count, game mode, map choice and easter eggs."""

from __future__ import annotations

from arenaparty.audio import AudioMixer
from arenaparty.userdata import UserDefaults

ENTER_EFFECT = "music/to_a_new_scene.mp3"
CLICK_EFFECT = "music/if_click_buttom_on_menu.mp3"
SELECT_EFFECT = "music/select_ok.mp3"
AI_NUMBER_TIP_EFFECT = "music/store_ai_number.mp3"

VOLUME_KEY = "musicVolume"
SELECTED_MAP_KEY = "selectedMap"
INVINCIBLE_MODE_KEY = "invincibleMode"
# The screen reads the opponent count from one key and writes it under another.
AI_NUMBER_READ_KEY = "selectedAINumber"
AI_NUMBER_WRITE_KEY = "selectedAINUmber"

AI_NUMBERS = (5, 6, 7, 8, 9)
MAPS = ("CLASSIC MAP", "OBSTACLES-TERRAIN MAP")
EGGSHELL_EFFECTS = {
    1: "music/printed_eggshell_1.mp3",
    2: "music/printed_eggshell_2.mp3",
    3: "music/printed_eggshell_3.mp3",
}


class StoreOptions:
    """State and actions behind the store screen reached from the main menu."""

    def __init__(self, store: UserDefaults, audio: AudioMixer) -> None:
        self.store = store
        self.audio = audio

        self.audio.play_effect(ENTER_EFFECT)
        self.audio.set_effects_volume_from(store, VOLUME_KEY)

        self.selected_ai_number = store.get_int(AI_NUMBER_READ_KEY)
        self.selected_invincible = store.get_int(INVINCIBLE_MODE_KEY)
        self.selected_map = store.get_int(SELECTED_MAP_KEY)

    def _play(self, path: str) -> None:
        self.audio.play_effect(path)
        self.audio.set_effects_volume_from(self.store, VOLUME_KEY)

    def select_ai_number(self, number: int) -> int:
        """Choose how many computer opponents join a match."""
        if number not in AI_NUMBERS:
            raise ValueError(f"opponent count must be one of {AI_NUMBERS}, not {number}")
        self._play(SELECT_EFFECT)
        self.store.set_int(AI_NUMBER_WRITE_KEY, number)
        return number

    def select_mode(self, invincible: bool) -> int:
        """Choose normal (0) or invincible (1) mode and return the stored code."""
        self._play(SELECT_EFFECT)
        mode = 1 if invincible else 0
        self.store.set_int(INVINCIBLE_MODE_KEY, mode)
        return mode

    def select_map(self, index: int) -> int:
        """Choose the map for the next match; the caller returns to the main menu."""
        if not 0 <= index < len(MAPS):
            raise ValueError(f"there is no map number {index}")
        self._play(CLICK_EFFECT)
        self.store.set_int(SELECTED_MAP_KEY, index)
        return index

    def play_eggshell(self, number: int) -> str:
        """Play the sound hidden behind easter egg ``number`` and return its path."""
        try:
            path = EGGSHELL_EFFECTS[number]
        except KeyError:
            raise ValueError(f"there is no easter egg number {number}") from None
        self._play(path)
        return path