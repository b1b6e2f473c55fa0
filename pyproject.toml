[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bladepm"
version = "0.1.0"
description = "Power manager logic: backlight dimming, brightness keys and settings dialog rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["power", "backlight", "brightness", "battery", "dpms", "settings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Power (UPS)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bladepm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
