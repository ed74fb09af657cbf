[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpsend"
version = "0.1.0"
description = "The sending half of a TCP endpoint: segmentation, windowing and retransmission over 32-bit wrapping sequence numbers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "networking", "sequence numbers", "retransmission", "sliding window"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tcpsend"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
