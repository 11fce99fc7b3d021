[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qsox"
version = "1.0.0"
description = "Typed IPv4/IPv6 addresses, socket and network addresses, and A/AAAA name resolution"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "ipv4", "ipv6", "ip-address", "socket-address", "dns", "resolver"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qsox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
