# arenaparty

The rules and state behind a small top-down arena battle game, as plain
Python with no dependencies beyond the standard library.

## What is inside

- `arenaparty.userdata`
  - `UserDefaults(path=None)` – a key/value store of integers and booleans.
    With a path it loads a JSON object from that file if it exists, and writes
    every change straight back to it (`flush()` does the write). It has
    `get_int`, `set_int`, `get_bool`, `set_bool`, and `init_int` / `init_bool`,
    which store a value only when the key holds zero or `False`.
  - `record_game_over(store)` – updates the career statistics when a match
    ends: a win when `_numOfPlayer` is 1, one more game played, `_hitNum`
    added to `_killNums`, and `6 + _numOfPlayer` trophies added to `_cupNums`
    when five or fewer players were left.
- `arenaparty.i18n`
  - `Language` – `ENGLISH` (0) and `CHINESE` (1).
  - `Translations` – a table of interface strings; `text(key)` raises
    `KeyError` for a missing entry.
  - `load_translations(path)` – reads a property-list dictionary of strings.
  - `translations_for(store, resource_dir)` – loads
    `language/English.xml` or `language/Chinese.xml` under `resource_dir`,
    according to the `language` value in the store.
- `arenaparty.movement`
  - `Direction` – the eight directions plus `ST` (standing).
  - `direction_from_keys(pressed)` – maps held keys (`w a s d` or
    `up down left right`) to a direction.
  - `AIState` and `choose_ai_direction(state, in_safe_area, rng=None)` –
    one frame of steering for a computer player: outside the safe area it
    turns back once, and after 100 frames still outside it picks random
    directions; inside it occasionally picks a new direction at random.
  - `step(position, direction)` – returns a `Step` with the new position,
    whether the fighter moved, and which way it faces (4 units straight,
    2.828 units on each axis diagonally).
- `arenaparty.audio`
  - `AudioMixer` – keeps the state of sound effects and background music:
    requested effects, preloads, the current track, pause state and volumes
    (clamped to 0–1). `set_effects_volume_from(store, key)` and
    `set_background_music_volume_from(store, key)` read a percentage from the
    store.
- `arenaparty.settings`
  - `SettingsPanel(store, audio, translations)` – `on_volume_changed(percent)`,
    `volume_text()`, `toggle_music()`, `toggle_fps()`, `clear_user_data()`
    (resets the statistics and sets the chosen hero back to 1) and
    `choose_language(language)`.
- `arenaparty.game_settings`
  - `GameSettingsPanel` – the in-match variant: the slider drives the music
    at twice the menu's volume, and `end_game()` calls `record_game_over`.
- `arenaparty.hero`
  - `HeroSelection(store, audio)` – `choose(number)` shows one of the four
    heroes, `confirm()` stores it under `selectedHero`, and
    `animation_frames(number)` lists the frames of its idle animation.
    `HERO_ANIMATIONS` describes each hero's sprite sheet, timing and scale.
- `arenaparty.store`
  - `StoreOptions(store, audio)` – `select_ai_number(number)` (5 to 9),
    `select_mode(invincible)`, `select_map(index)` (0 or 1) and
    `play_eggshell(number)` (1 to 3). Out-of-range choices raise `ValueError`.

## What it does not do

The package holds state and rules only. It draws nothing, plays no sound
(`AudioMixer` records what should be played), has no game loop, no screen
effects and no command to start a game; a front end has to provide those.

## Installing

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Example

    import random
    from arenaparty.userdata import UserDefaults
    from arenaparty.movement import AIState, choose_ai_direction, direction_from_keys, step

    store = UserDefaults("profile.json")
    store.init_int("musicVolume", 50)

    direction = direction_from_keys({"d", "w"})
    x, y = step((100.0, 100.0), direction).position

    ai = AIState()
    choose_ai_direction(ai, in_safe_area=False, rng=random.Random(1))