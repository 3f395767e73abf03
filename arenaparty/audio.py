"""Playback state for sound effects and background music."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from arenaparty.userdata import UserDefaults


def _clamp(volume: float) -> float:
    return min(1.0, max(0.0, float(volume)))


@dataclass(frozen=True)
class EffectPlayback:
    """One requested sound effect."""

    effect_id: int
    path: str
    loop: bool
    pitch: float
    pan: float
    gain: float


@dataclass
class AudioMixer:
    """Keeps track of effects, background music and their volumes."""

    effects_volume: float = 1.0
    background_volume: float = 1.0
    played_effects: list[EffectPlayback] = field(default_factory=list)
    preloaded_effects: set[str] = field(default_factory=set)
    preloaded_music: set[str] = field(default_factory=set)
    current_music: str | None = None
    music_loop: bool = False
    _music_paused: bool = False
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1), repr=False)

    def play_effect(
        self, path: str, loop: bool = False, pitch: float = 1.0, pan: float = 0.0, gain: float = 1.0
    ) -> int:
        playback = EffectPlayback(next(self._ids), path, loop, pitch, pan, gain)
        self.played_effects.append(playback)
        return playback.effect_id

    def set_effects_volume(self, volume: float) -> None:
        self.effects_volume = _clamp(volume)

    def set_effects_volume_from(self, store: UserDefaults, key: str) -> None:
        """Use the percentage stored under ``key`` as the effects volume."""
        self.set_effects_volume(store.get_int(key) / 100)

    def play_background_music(self, path: str, loop: bool = False) -> None:
        self.current_music = path
        self.music_loop = loop
        self._music_paused = False

    def set_background_music_volume(self, volume: float) -> None:
        self.background_volume = _clamp(volume)

    def set_background_music_volume_from(self, store: UserDefaults, key: str) -> None:
        """Use the percentage stored under ``key`` as the music volume."""
        self.set_background_music_volume(store.get_int(key) / 100)

    def preload_effect(self, path: str) -> None:
        self.preloaded_effects.add(path)

    def preload_background_music(self, path: str) -> None:
        self.preloaded_music.add(path)

    def is_background_music_playing(self) -> bool:
        return self.current_music is not None and not self._music_paused

    def pause_background_music(self) -> None:
        if self.current_music is not None:
            self._music_paused = True

    def resume_background_music(self) -> None:
        if self.current_music is not None:
            self._music_paused = False