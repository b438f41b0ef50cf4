[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "famp"
version = "0.1.0"
description = "Boot protocol helpers: boot.yaml parsing, partition headers, boot source templating, and models of the protocol's text screen, keyboard, colour prompt and GDT."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bootloader",
    "boot protocol",
    "partition",
    "gdt",
    "vga text mode",
    "scancode",
    "osdev",
]
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
    "Topic :: System :: Boot",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["famp"]

[tool.pytest.ini_options]
addopts = "-ra"
