[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxdialog"
version = "1.0.1"
description = "Curses dialog boxes for shell scripts: menus, radio lists, input, yes/no, message and text boxes"
requires-python = ">=3.10"
dependencies = []
keywords = ["dialog", "curses", "tui", "menu", "terminal", "xpm", "gettext"]
classifiers = [
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boxdialog = "boxdialog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["boxdialog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
