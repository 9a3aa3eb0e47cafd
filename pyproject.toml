[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timrest"
version = "0.1.0"
description = "Client for the Tencent Cloud IM server-side REST API: user signatures, profiles, single-chat messages, mutes, recent contacts and all-member push."
requires-python = ">=3.10"
dependencies = []
keywords = ["im", "chat", "instant-messaging", "rest", "usersig", "push"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timrest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
