[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small console exercises, a word-guessing game, a team roster manager and a brick-breaker arcade game"
requires-python = ">=3.10"
keywords = ["breakout", "arcade", "wordle", "exercises", "algorithms", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
coursekit-students = "coursekit.students:main"
coursekit-wordle = "coursekit.wordle:main"
coursekit-vector = "coursekit.vector2d:main"
coursekit-dynarray = "coursekit.dynarray:main"
coursekit-roster = "coursekit.roster:main"
coursekit-breakout = "coursekit.breakout.app:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
