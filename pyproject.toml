[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rangefetch"
version = "0.1.0"
description = "Show a coloured banner next to a summary of the system: OS, CPU, memory, GPU, addresses and uptime."
requires-python = ">=3.10"
keywords = ["fetch", "system information", "terminal", "banner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rangefetch = "rangefetch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rangefetch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
