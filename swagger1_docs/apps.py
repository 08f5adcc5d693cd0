#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from fastapi import APIRouter, FastAPI, Query, Response

from swagger1_docs.cache import DocumentationCache
from swagger1_docs.controller import Swagger1Controller
from swagger1_docs.log import configure_logger
from swagger1_docs.mappers import ServiceModelToSwaggerMapper
from swagger1_docs.site_context import docs_path, log_path, normalize_path


def make_router(controller: Swagger1Controller, prefix: str) -> APIRouter:
    # the documentation endpoints do not document themselves
    router = APIRouter(prefix=normalize_path(prefix), include_in_schema=False)

    @router.get("")
    async def get_resource_listing(group: str | None = Query(None)) -> Response:
        return controller.get_resource_listing(group)

    @router.get("/{swagger_group}/{api_declaration}")
    async def get_api_listing(swagger_group: str, api_declaration: str) -> Response:
        return controller.get_api_listing(swagger_group, api_declaration)

    return router


def make_app(
    documentation_cache: DocumentationCache,
    *,
    mapper: ServiceModelToSwaggerMapper | None = None,
    prefix: str | None = None,
) -> FastAPI:
    controller = Swagger1Controller(
        documentation_cache,
        ServiceModelToSwaggerMapper() if mapper is None else mapper,
    )
    app = FastAPI(title="Swagger 1.2 Documentation")
    app.include_router(make_router(controller, docs_path() if prefix is None else prefix))
    return app


def main_app(documentation_cache: DocumentationCache) -> FastAPI:
    configure_logger(log_path())
    return make_app(documentation_cache)
