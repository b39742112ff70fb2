[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swarmlet"
version = "0.1.0"
description = "Compose LLM calls, tool-using agents and output steps into small workflow pipelines."
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["llm", "agents", "workflow", "pipeline", "openai", "tools"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
swarmlet-example = "swarmlet.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["swarmlet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
