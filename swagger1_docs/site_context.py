#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import functools
import os
from pathlib import Path

DEFAULT_DOCS_PATH = "/api-docs"


def normalize_path(path: str) -> str:
    """
    >>> normalize_path("api-docs/")
    '/api-docs'
    >>> normalize_path("/v1/api-docs")
    '/v1/api-docs'
    >>> normalize_path("")
    '/api-docs'
    """
    if not (stripped := path.strip().strip("/")):
        return DEFAULT_DOCS_PATH
    return f"/{stripped}"


@functools.lru_cache
def docs_path() -> str:
    return normalize_path(os.environ.get("SWAGGER_V1_PATH", DEFAULT_DOCS_PATH))


@functools.lru_cache
def log_path() -> Path | None:
    if not (path := os.environ.get("SWAGGER1_DOCS_LOG_FILE")):
        return None
    return Path(path)
