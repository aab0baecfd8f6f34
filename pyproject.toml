[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strapkit"
version = "0.1.0"
description = "Small building blocks for applications: gettext message translation and positional formatting, a JSON document container, and levelled logging to a stream or syslog."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "logging", "i18n", "gettext", "translation", "syslog"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strapkit"]

[tool.pytest.ini_options]
addopts = "-ra"
