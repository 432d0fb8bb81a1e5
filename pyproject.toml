[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisekit"
version = "0.1.0"
description = "Small worked programming exercises: algorithms, parsers, data structures, concurrency and networking."
requires-python = ">=3.10"
keywords = [
    "exercises",
    "education",
    "collatz",
    "fibonacci",
    "protobuf",
    "binary-tree",
    "dining-philosophers",
    "link-checker",
    "websocket-chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "websockets>=12.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "responses>=0.23",
]

[project.scripts]
exercisekit-collatz = "exercisekit.collatz:main"
exercisekit-fibonacci = "exercisekit.fibonacci:main"
exercisekit-transpose = "exercisekit.matrix:main"
exercisekit-vectors = "exercisekit.vectors:main"
exercisekit-counter = "exercisekit.counter:main"
exercisekit-package-builder = "exercisekit.package_builder:main"
exercisekit-widgets = "exercisekit.widgets:main"
exercisekit-verbosity = "exercisekit.verbosity:main"
exercisekit-elevator = "exercisekit.elevator:main"
exercisekit-listdir = "exercisekit.listdir:main"
exercisekit-tasks = "exercisekit.tasks:main"
exercisekit-philosophers = "exercisekit.philosophers:main"
exercisekit-async-philosophers = "exercisekit.async_philosophers:main"
exercisekit-link-checker = "exercisekit.link_checker:main"
exercisekit-chat-server = "exercisekit.chat_server:main"
exercisekit-chat-client = "exercisekit.chat_client:main"

[tool.hatch.build.targets.wheel]
packages = ["exercisekit"]

[tool.hatch.build.targets.sdist]
include = ["exercisekit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
