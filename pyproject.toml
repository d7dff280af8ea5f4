[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palmlog"
version = "1.0.0"
description = "A shared debug-log record store with a writer, a test client and a filtering viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "debug-log", "log-viewer", "palm"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
palmlog-test = "palmlog.logtest:main"
palmlog-view = "palmlog.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["palmlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
