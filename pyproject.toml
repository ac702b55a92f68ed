[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebookeditor"
version = "0.1.0"
description = "E-book model of chapters and pages, with a binary .ebk file format, text search and an editing session"
requires-python = ">=3.10"
dependencies = []
keywords = ["ebook", "editor", "chapters", "pages", "ebk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Word Processors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ebookeditor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
