"""Choosing the hero a player fights with."""

from __future__ import annotations

from dataclasses import dataclass

from arenaparty.audio import AudioMixer
from arenaparty.userdata import UserDefaults

ENTER_EFFECT = "music/to_a_new_scene.mp3"
CLICK_EFFECT = "music/if_click_buttom_on_menu.mp3"

VOLUME_KEY = "musicVolume"
SELECTED_HERO_KEY = "selectedHero"

HERO_NUMBERS = (1, 2, 3, 4)


@dataclass(frozen=True)
class HeroAnimation:
    """How a hero's idle animation is shown on the selection screen."""

    sprite: str
    sheet: str
    texture: str
    sound: str
    frames: tuple[str, ...]
    delay: float
    scale: float
    position: tuple[float, float]
    restore_original_frame: bool


HERO_ANIMATIONS: dict[int, HeroAnimation] = {
    1: HeroAnimation(
        sprite="character/Hero1/hero.png",
        sheet="character/Hero1/hero1_Start.plist",
        texture="character/Hero1/hero1_Start.png",
        sound="music/hero1.mp3",
        frames=tuple(f"adventurer-idle ({i}).png" for i in range(4, 8)),
        delay=0.15,
        scale=5.0,
        position=(700.0, 350.0),
        restore_original_frame=True,
    ),
    2: HeroAnimation(
        sprite="character/Hero2/hero.png",
        sheet="character/Hero2/hero2_Normal.plist",
        texture="character/Hero2/hero2_Normal.png",
        sound="music/hero2.mp3",
        frames=tuple(f"Idle-{i}.png" for i in range(0, 8)),
        delay=0.1,
        scale=5.0,
        position=(700.0, 350.0),
        restore_original_frame=True,
    ),
    3: HeroAnimation(
        sprite="character/Hero3/hero.png",
        sheet="character/Hero3/hero3_Start2.plist",
        texture="character/Hero3/hero3_Start2.png",
        sound="music/hero3.mp3",
        frames=tuple(f"Start3 ({i}).png" for i in range(1, 7)),
        delay=0.1,
        scale=2.5,
        position=(720.0, 360.0),
        restore_original_frame=False,
    ),
    4: HeroAnimation(
        sprite="character/Hero4/hero.png",
        sheet="character/Hero4/hero4_Start.plist",
        texture="character/Hero4/hero4_Start.png",
        sound="music/hero4.mp3",
        frames=tuple(f"Start4 ({i}).png" for i in range(1, 9)),
        delay=0.1,
        scale=4.0,
        position=(700.0, 450.0),
        restore_original_frame=False,
    ),
}


def _animation(number: int) -> HeroAnimation:
    try:
        return HERO_ANIMATIONS[number]
    except KeyError:
        raise ValueError(f"there is no hero number {number}") from None


class HeroSelection:
    """State behind the hero screen: which hero is shown and which is confirmed."""

    def __init__(self, store: UserDefaults, audio: AudioMixer) -> None:
        self.store = store
        self.audio = audio
        self.chosen = 1
        self.displayed: int | None = None
        self.confirm_enabled = True

        self.audio.play_effect(ENTER_EFFECT)
        self.audio.set_effects_volume_from(store, VOLUME_KEY)

        self.selected_hero = store.get_int(SELECTED_HERO_KEY)
        if self.selected_hero:
            if self.selected_hero in HERO_ANIMATIONS:
                self._show(self.selected_hero)
            self.confirm_enabled = False

    def _click(self) -> None:
        self.audio.play_effect(CLICK_EFFECT)
        self.audio.set_effects_volume_from(self.store, VOLUME_KEY)

    def _show(self, number: int) -> None:
        animation = _animation(number)
        self.displayed = number
        self.audio.play_effect(animation.sound)
        self.audio.set_effects_volume_from(self.store, VOLUME_KEY)

    def choose(self, number: int) -> int | None:
        """Look at hero ``number``; return the hero now on display."""
        _animation(number)
        self._click()
        self.confirm_enabled = self.selected_hero != number
        if self.chosen != number:
            self._show(number)
            self.chosen = number
        return self.displayed

    def confirm(self) -> int:
        """Make the hero being looked at the player's hero and return it."""
        self._click()
        if self.chosen in HERO_NUMBERS:
            self.store.set_int(SELECTED_HERO_KEY, self.chosen)
        self.selected_hero = self.store.get_int(SELECTED_HERO_KEY)
        self.confirm_enabled = False
        return self.selected_hero

    def animation_frames(self, number: int) -> tuple[str, ...]:
        """Names of the sprite frames of hero ``number``'s idle animation, in order."""
        return _animation(number).frames