#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterator

import pytest

from swagger1_docs import models, site_context
from swagger1_docs.cache import DocumentationCache
from swagger1_docs.log import logger

PET_MODEL = models.Model(
    id="Pet",
    name="Pet",
    qualified_type="com.example.petstore.Pet",
    properties={
        "name": models.ModelProperty(
            "name", models.ModelRef("string"), position=1, required=True
        ),
        "id": models.ModelProperty("id", models.ModelRef("long"), position=0, required=True),
        "tags": models.ModelProperty(
            "tags", models.ModelRef("List", item_type="string"), position=2
        ),
        "status": models.ModelProperty(
            "status",
            models.ModelRef("string"),
            position=3,
            description="pet status in the store",
            allowable_values=models.AllowableListValues(["available", "pending", "sold"]),
        ),
    },
)

PETS_LISTING = models.ApiListing(
    api_version="1.0",
    base_path="http://localhost:8080",
    resource_path="/pets",
    produces=["application/json"],
    security_references=[
        models.SecurityReference("api_key", [models.AuthorizationScope("read", "read pets")])
    ],
    apis=[
        models.ApiDescription(
            path="/pets/{petId}",
            description="Operations about pets",
            operations=[
                models.Operation(
                    method="GET",
                    unique_id="getPetById",
                    response_model=models.ModelRef("Pet"),
                    summary="Find pet by ID",
                    parameters=[
                        models.Parameter(
                            name="petId",
                            model_ref=models.ModelRef("long"),
                            param_type="path",
                            required=True,
                        )
                    ],
                    response_messages=[models.ResponseMessage(404, "Pet not found")],
                )
            ],
        )
    ],
    models={"Pet": PET_MODEL},
    description="Operations about pets",
)

RESOURCE_LISTING = models.ResourceListing(
    api_version="1.0",
    apis=[models.ApiListingReference("/default/pets", "Operations about pets", 0)],
    security_schemes=[models.ApiKey("api_key", "api_key", "header")],
    info=models.ApiInfo(title="Petstore", description="A sample pet store"),
)


@pytest.fixture(name="documentation")
def fixture_documentation() -> models.Documentation:
    return models.Documentation(
        group_name="default",
        resource_listing=RESOURCE_LISTING,
        api_listings={"pets": PETS_LISTING},
    )


@pytest.fixture(name="documentation_cache")
def fixture_documentation_cache(documentation: models.Documentation) -> DocumentationCache:
    cache = DocumentationCache()
    cache.add_documentation(documentation)
    return cache


@pytest.fixture(autouse=True)
def clear_site_context() -> Iterator[None]:
    site_context.docs_path.cache_clear()
    site_context.log_path.cache_clear()
    yield
    site_context.docs_path.cache_clear()
    site_context.log_path.cache_clear()


@pytest.fixture(name="restore_logger")
def fixture_restore_logger() -> Iterator[None]:
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(level)
