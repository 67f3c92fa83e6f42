[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossup"
version = "0.1.0"
description = "Edit docker compose service definitions for local development: debugging, local binaries, web sources and static scaling"
requires-python = ">=3.10"
dependencies = []
keywords = ["docker", "compose", "development", "debugging", "bind-mount"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ossup"]

[tool.pytest.ini_options]
addopts = "-ra"
