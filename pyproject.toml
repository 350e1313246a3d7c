[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "postureutils"
version = "0.1.0"
description = "Data models and helpers for Kubernetes security posture scans: statuses, exception policies, attack tracks, object envelopes and resource ID sets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "kubernetes",
    "security",
    "posture",
    "compliance",
    "attack-track",
    "exceptions",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["postureutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
