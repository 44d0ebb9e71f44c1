[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yet"
version = "0.1.0"
description = "Local video library keeper: track channels, playlists and videos, queue downloads, record watch history"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "youtube", "playlist", "channel", "download-queue", "watch-history"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yet = "yet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yet"]

[tool.pytest.ini_options]
addopts = "-ra"
