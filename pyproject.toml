[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenaparty"
version = "0.1.0"
description = "Game logic for a small arena battle game: user data, translations, movement, AI steering, audio state, settings, hero and store screens"
requires-python = ">=3.10"
keywords = ["game", "arcade", "arena", "battle-royale", "settings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arenaparty"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
