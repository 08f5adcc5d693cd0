#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Mapping
from types import MappingProxyType

from swagger1_docs.log import logger
from swagger1_docs.models import Documentation


class DocumentationCache:
    """Documentation per group, as produced by the documentation build

    The build stores (and refreshes) entries, request handlers only read them.
    """

    def __init__(self) -> None:
        self._documentation_lookup: dict[str, Documentation] = {}

    def add_documentation(self, documentation: Documentation) -> None:
        replaced = documentation.group_name in self._documentation_lookup
        self._documentation_lookup[documentation.group_name] = documentation
        logger.info(
            "group=%s %s documentation with %d api listing(s)",
            documentation.group_name,
            "Replaced" if replaced else "Added",
            len(documentation.api_listings),
        )

    def documentation_by_group(self, group_name: str) -> Documentation | None:
        return self._documentation_lookup.get(group_name)

    def all(self) -> Mapping[str, Documentation]:
        return MappingProxyType(self._documentation_lookup)

    def clear(self) -> None:
        self._documentation_lookup.clear()
