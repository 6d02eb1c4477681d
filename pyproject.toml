[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small teaching examples: sorting and searching algorithms, fractions, a countdown, a train of cars, dice, a four-colour pen and number formatting."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "sorting", "searching", "examples", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-sorting = "coursekit.sorting:main"
coursekit-searching = "coursekit.searching:main"
coursekit-fraction = "coursekit.fraction:main"
coursekit-countdown = "coursekit.countdown:main"
coursekit-train = "coursekit.train:main"
coursekit-snakeeyes = "coursekit.die:main"
coursekit-pen = "coursekit.pen:main"
coursekit-formatting = "coursekit.formatting:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
