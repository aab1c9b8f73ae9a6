[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jupiter-styles"
version = "0.1.0"
description = "Chainable builders that generate Tailwind CSS class strings for state displays, selection groups and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["design-system", "ui", "tailwind", "css", "builder"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jupiter_styles"]

[tool.pytest.ini_options]
addopts = "-ra"
