[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "postmangen"
version = "0.1.0"
description = "Generate a Postman collection from the routes and structs of a Go HTTP service"
requires-python = ">=3.10"
dependencies = []
keywords = ["postman", "collection", "api", "routes", "code generation", "chi", "gorilla"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
postmangen = "postmangen.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["postmangen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
