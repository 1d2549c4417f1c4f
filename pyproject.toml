[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surfprint"
version = "0.1.0"
description = "Browser fingerprint profiles for HTTP clients: TLS ClientHello choices, HTTP/2 settings, QUIC identifiers and browser headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "http2", "http3", "quic", "tls", "fingerprint", "impersonation", "ja3"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["surfprint"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
