[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nvmfab"
version = "1.1.0"
description = "NVMe over Fabrics helpers: connect options, discovery field decoding, host identifiers and sysfs scanning"
requires-python = ">=3.10"
dependencies = []
keywords = ["nvme", "nvme-of", "fabrics", "sysfs", "storage", "discovery", "hostnqn"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nvmfab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
