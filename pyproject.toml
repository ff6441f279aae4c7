[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdftext"
version = "0.1.0"
description = "Signed distance field fonts: SDFF reading and writing, text measurement and word-wrapped glyph mesh layout"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["font", "sdf", "signed distance field", "text layout", "glyph", "mesh"]
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
    "Topic :: Text Processing :: Fonts",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["sdftext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
