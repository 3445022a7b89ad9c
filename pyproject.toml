[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wnucore"
version = "0.1.0"
description = "Small core command-line utilities: cat, clear, grep, head, tail, lsw, rm and touch"
requires-python = ">=3.10"
dependencies = [
    "termcolor",
]
keywords = ["coreutils", "cli", "cat", "grep", "head", "tail", "ls", "rm", "touch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wnu = "wnucore.wnu:main"
wcat = "wnucore.cat:main"
wclear = "wnucore.clear:main"
wgrep = "wnucore.grep:main"
whead = "wnucore.head:main"
wtail = "wnucore.tail:main"
lsw = "wnucore.lsw:main"
wrm = "wnucore.rm:main"
wtouch = "wnucore.touch:main"

[tool.hatch.build.targets.wheel]
packages = ["wnucore"]

[tool.pytest.ini_options]
addopts = "-ra"
