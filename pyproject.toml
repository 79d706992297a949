[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordinvaders"
version = "0.3.0"
description = "A space-invaders style arcade game for practising English spelling by shooting the missing letter."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "vocabulary", "spelling", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wordinvaders = "wordinvaders.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wordinvaders"]

[tool.pytest.ini_options]
addopts = "-ra"
