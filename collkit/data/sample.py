"""
Bundled sample dataset: a handful of npm package manifests trimmed to the
fields the demo pipelines use.
"""

import copy
from typing import Any

SAMPLE_PACKAGES: list[dict[str, Any]] = [
    {
        "name": "grunt-mocha-cli",
        "description": "Run Mocha server-side tests in Grunt.",
        "license": "MIT",
        "author": {"name": "Roland Warmerdam", "url": "https://github.com/Rowno"},
        "keywords": ["gruntplugin", "mocha"],
    },
    {
        "name": "grunt-contrib-watch",
        "description": "Run predefined tasks whenever watched file patterns are added, changed or deleted",
        "license": "MIT",
        "author": {"name": "Grunt Team", "url": "http://gruntjs.com/"},
        "keywords": ["gruntplugin", "watch"],
    },
    {
        "name": "grunt-contrib-jshint",
        "description": "Validate files with JSHint",
        "license": "MIT",
        "author": {"name": "Grunt Team", "url": "http://gruntjs.com/"},
        "keywords": ["gruntplugin"],
    },
    {
        "name": "errorjs",
        "description": "Create custom errors with a stable name and status code",
        "license": "ISC",
        "author": {"name": "Wilson Page"},
    },
    {
        "name": "lodash",
        "description": "Lodash modular utilities.",
        "license": "MIT",
        "author": {"name": "John-David Dalton", "email": "john.david.dalton@gmail.com"},
        "keywords": ["modules", "stdlib", "util", "amd", "browser", "client", "customize"],
    },
]


def get_sample_data() -> list[dict[str, Any]]:
    """Return a fresh deep copy of the sample packages."""
    return copy.deepcopy(SAMPLE_PACKAGES)
