[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitswitcher"
version = "0.1.0"
description = "A tool to easily switch between different git configurations"
requires-python = ">=3.10"
keywords = ["git", "gitconfig", "profiles", "switcher", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]
dependencies = [
    "click>=8.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
git-switcher = "gitswitcher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitswitcher"]

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
