[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "operator_ledger"
version = "0.1.0"
description = "Account layouts and epoch-ordered history buffers for an operator ledger"
requires-python = ">=3.10"
dependencies = []
keywords = ["ledger", "operator", "history", "circular-buffer", "staking", "program-derived-address"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["operator_ledger"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
