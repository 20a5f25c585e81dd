[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unitygen"
version = "0.1.0"
description = "Model swagger definitions and render them as C# classes and enums for Unity3D"
requires-python = ">=3.10"
dependencies = []
keywords = ["swagger", "openapi", "unity3d", "csharp", "codegen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unitygen"]

[tool.pytest.ini_options]
addopts = "-ra"
