[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questionforge"
version = "0.1.0"
description = "Generate JLPT-style reading questions with Gemini, then merge and normalise the resulting JSON files."
requires-python = ">=3.10"
keywords = ["jlpt", "japanese", "questions", "gemini", "json", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "respx",
]

[project.scripts]
questionforge-generate = "questionforge.generate:main"
questionforge-concat = "questionforge.concat:main"
questionforge-restructure = "questionforge.restructure:main"

[tool.hatch.build.targets.wheel]
packages = ["questionforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
