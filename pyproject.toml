[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tombkeeper"
version = "0.2.3"
description = "AES-256-CBC keys and encryption, plus the state objects behind a keyboard-driven password manager interface"
requires-python = ">=3.10"
keywords = ["aes", "aes-256-cbc", "pbkdf2", "hmac", "password-manager", "secrets", "encryption"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tombkeeper"]

[tool.hatch.build.targets.sdist]
include = ["tombkeeper", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
