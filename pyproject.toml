[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabs"
version = "0.1.0"
description = "Small Unix tools, an in-memory block file system and a minimal interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "filesystem", "xargs", "primes", "find", "ps", "cp", "unix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslabs-primes = "oslabs.primes:main"
oslabs-xargs = "oslabs.xargs:main"
oslabs-cp0 = "oslabs.cp0:main"
oslabs-cp1 = "oslabs.cp1:main"
oslabs-find = "oslabs.find:main"
oslabs-ps = "oslabs.ps:main"
oslabs-sh = "oslabs.sh:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
