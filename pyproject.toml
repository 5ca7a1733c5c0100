[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfsplugin"
version = "0.1.0"
description = "GlusterFS volume plugin for Docker: request validation, mount option building and a Unix socket listener"
requires-python = ">=3.10"
dependencies = []
keywords = ["glusterfs", "docker", "volume", "plugin", "mount"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gfsplugin = "gfsplugin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gfsplugin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
