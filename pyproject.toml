[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circlearena"
version = "0.1.0"
description = "A top-down arena survival game: dodge red circles while your auto-firing shots clear them away."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "survival", "arena"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
circlearena = "circlearena.app:main"

[tool.hatch.build.targets.wheel]
packages = ["circlearena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
