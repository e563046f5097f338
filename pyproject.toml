[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rekorcheck"
version = "0.1.0"
description = "Verify binary signatures and certificates stored in a Rekor transparency log"
requires-python = ">=3.10"
keywords = ["rekor", "sigstore", "signature", "verification", "transparency-log", "ecdsa"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "requests>=2.28",
    "cryptography>=41",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
rekorcheck = "rekorcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rekorcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
