[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcviewgen"
version = "0.1.0"
description = "Render Minecraft-style views such as the online player list into PNG images and serve them over HTTP"
requires-python = ">=3.10"
keywords = [
    "minecraft",
    "image",
    "rendering",
    "player-list",
    "skin",
    "http-api",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
    "requests",
    "pyyaml",
    "flask",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mcviewgen = "mcviewgen.server:main"

[tool.hatch.build.targets.wheel]
packages = ["mcviewgen"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
