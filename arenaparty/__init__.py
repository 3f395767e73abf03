"""Game logic for a small arena battle game: user data, translations, movement, audio state and menu screens."""

__version__ = "0.1.0"