[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robo_utils"
version = "0.1.0"
description = "Small general-purpose utilities: thread-local error state, allocators, array lists, char buffers, string helpers, filesystem, environment and process queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "error-handling", "allocator", "array-list", "filesystem", "environment", "strings"]
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
packages = ["robo_utils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
