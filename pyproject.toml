[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limitvfs"
version = "0.1.0"
description = "A virtual file system scheme that exposes one real directory as its root"
requires-python = ">=3.10"
dependencies = []
keywords = ["vfs", "filesystem", "uri", "virtual-filesystem", "uri-scheme"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
limitvfs = "limitvfs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["limitvfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
