[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corosync"
version = "0.1.0"
description = "Coroutine synchronisation primitives, a task container and small socket helpers for asyncio"
requires-python = ">=3.10"
dependencies = []
keywords = ["asyncio", "coroutines", "event", "latch", "mutex", "sync_wait", "tcp", "socket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["corosync"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
