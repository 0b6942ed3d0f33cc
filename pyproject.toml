[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recoengine"
version = "0.1.0"
description = "Small recommendation engine: user-based KNN, matrix factorization and personalized PageRank over a ratings file"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["recommender", "collaborative-filtering", "knn", "matrix-factorization", "pagerank"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
recoengine-menu = "recoengine.menu:main"
recoengine-server = "recoengine.server:main"
recoengine-client = "recoengine.client:main"
recoengine-generate = "recoengine.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["recoengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
