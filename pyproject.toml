[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memomark"
version = "0.1.0"
description = "A small markdown dialect for memos: tokenizer, parser, syntax tree, restorer and HTML/plain-text renderers."
requires-python = ">=3.11"
dependencies = []
keywords = ["markdown", "parser", "ast", "memo", "html", "renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memomark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
