#!python


__project__ = "bezierscore"
__version__ = "0.1.0"
__license__ = "Apache"
__description__ = "Leaderboard scores distributed along a quadratic Bezier curve"
__author__ = "dresswithpockets"
__github__ = "https://github.com/dresswithpockets/bezierscore"
__keywords__ = [
    "leaderboard",
    "scoring",
    "bezier",
]
__python_version__ = ">=3.10"
__classifiers__ = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: Apache Software License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Topic :: Games/Entertainment",
]
__console_scripts__ = [
    "bezierscore=bezierscore.cli:run",
]
__urls__ = {
    "GitHub": __github__,
    "Scoring system": "https://dresswithpockets.github.io/2025/10/14/scoring-system.html",
}
