[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timemarches"
version = "0.1.0"
description = "Game logic for a short narrative game: timers, sprite animation, audio tweens, scripted movement and an inventory menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "animation", "tween", "easing", "inventory", "menu-navigation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timemarches"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
