[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acme-bank"
version = "1.0.0"
description = "A small current-account ledger driven by numbered commands, with CSV load and save"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "ledger", "accounts", "csv", "transactions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acme-bank = "acme_bank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["acme_bank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
