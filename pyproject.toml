[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpuutil"
version = "1.0.0"
description = "Print per-CPU and overall CPU utilization percentage over time, read from /proc/stat"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpu", "utilization", "monitoring", "proc", "linux"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpuutil = "cpuutil.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cpuutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
