[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "announce"
version = "0.1.0"
description = "Scheduled chat-space announcements: uniform reminders, attendance prompts with a daily quote, joke or fact, and progress reminders."
requires-python = ">=3.10"
keywords = ["chat", "webhook", "scheduler", "reminder", "announcement", "cards"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "requests>=2.28",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
announce = "announce.scheduler:main"

[tool.hatch.build.targets.wheel]
packages = ["announce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
