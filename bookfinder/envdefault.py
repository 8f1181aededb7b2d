# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

BOOKFINDER_CONFIG_DIR = os.environ.get("BOOKFINDER_CONFIG_DIR", os.path.join(USER_HOME, ".config", "bookfinder"))

BOOKFINDER_CLIENT_CONFIG = os.environ.get(
    "BOOKFINDER_CLIENT_CONFIG", os.path.join(BOOKFINDER_CONFIG_DIR, "bookfinder-client.json")
)
BOOKFINDER_URL = os.environ.get("BOOKFINDER_URL", "https://openlibrary.org")
BOOKFINDER_COVERS_URL = os.environ.get("BOOKFINDER_COVERS_URL", "https://covers.openlibrary.org")
