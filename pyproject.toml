[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatdesk"
version = "0.1.0"
description = "Building blocks for a customer-service chat desk: response envelopes, request schemas, validation rules, file storage and schema migration."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "chat",
    "customer-service",
    "helpdesk",
    "api",
    "validation",
    "storage",
    "migration",
]
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
    "Topic :: Communications :: Chat",
    "Topic :: Internet :: WWW/HTTP",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chatdesk-migrate = "chatdesk.migrate:main"

[tool.hatch.build.targets.wheel]
packages = ["chatdesk"]

[tool.pytest.ini_options]
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
