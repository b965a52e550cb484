[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "craftclient"
version = "0.1.0"
description = "Client-side building blocks for the Minecraft protocol: world and chunk storage, entities, Forge handshake and session hashing"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "protocol", "client", "chunk", "forge", "sha1"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["craftclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
