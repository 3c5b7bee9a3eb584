[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todoservice"
version = "1.0.0"
description = "A small JSON REST service for todo entries, kept in memory, with a Swagger 2.0 description"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["todo", "rest", "http", "flask", "json", "swagger", "openapi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
todoservice = "todoservice.app:main"

[tool.hatch.build.targets.wheel]
packages = ["todoservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
