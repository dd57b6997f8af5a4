[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "mycochess"
version = "0.1.0"
description = "Bitboard chess core: FEN parsing, magic sliding-piece tables, position evaluation and a SQLite move store"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "fen", "magic bitboards", "evaluation"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["mycochess*"]

[tool.pytest.ini_options]
addopts = "-ra"
