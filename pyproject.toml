[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bonzai"
version = "0.1.0"
description = "Composable command trees with bash self-completion, small data structures and two ready-made commands"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cli",
    "command",
    "completion",
    "multicall",
    "tree",
    "stack",
    "queue",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sunrise = "bonzai.sunrise:main"
kimono = "bonzai.kimono.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bonzai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
