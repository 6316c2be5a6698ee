[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mavcore"
version = "0.5.10"
description = "MAVLink building blocks: protocol type aliases, sha256_48 message signing and in-memory byte readers and writers."
requires-python = ">=3.10"
dependencies = []
keywords = ["MAVLink", "UAV", "drones", "telemetry", "protocol", "signing"]
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
    "Topic :: Communications",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mavcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
