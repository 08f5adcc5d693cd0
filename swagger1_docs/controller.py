#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterable

from fastapi import Response
from starlette.status import HTTP_200_OK, HTTP_404_NOT_FOUND

from swagger1_docs.cache import DocumentationCache
from swagger1_docs.json_codec import CodecExtension, JsonCodec, swagger_module
from swagger1_docs.log import logger
from swagger1_docs.mappers import ServiceModelToSwaggerMapper, to_api_listing_dtos

DEFAULT_GROUP = "default"
JSON_MEDIA_TYPE = "application/json"


def effective_group_name(group_name: str | None) -> str:
    """
    >>> effective_group_name(None)
    'default'
    >>> effective_group_name("")
    'default'
    >>> effective_group_name("billing")
    'billing'
    """
    return group_name or DEFAULT_GROUP


class Swagger1Controller:
    """Serves the cached documentation as Swagger 1.2 JSON

    The JSON codec is built here and owned by the controller. It is not shared with the encoder
    of the hosting application, so the documentation format does not depend on how that one is
    configured.
    """

    def __init__(
        self,
        documentation_cache: DocumentationCache,
        mapper: ServiceModelToSwaggerMapper,
        codec_extensions: Iterable[CodecExtension] = (swagger_module,),
    ) -> None:
        self._documentation_cache = documentation_cache
        self._mapper = mapper
        self._codec = JsonCodec(codec_extensions)

    def get_resource_listing(self, group_name: str | None) -> Response:
        group = effective_group_name(group_name)
        if (documentation := self._documentation_cache.documentation_by_group(group)) is None:
            logger.debug("group=%s No documentation found", group)
            return Response(status_code=HTTP_404_NOT_FOUND)

        resource_listing = self._mapper.to_swagger_resource_listing(documentation.resource_listing)
        return self._json_response(resource_listing)

    def get_api_listing(self, group_name: str | None, api_declaration: str) -> Response:
        group = effective_group_name(group_name)
        if (documentation := self._documentation_cache.documentation_by_group(group)) is None:
            logger.debug("group=%s No documentation found", group)
            return Response(status_code=HTTP_404_NOT_FOUND)

        api_listings = to_api_listing_dtos(self._mapper, documentation.api_listings)
        if (api_listing := api_listings.get(api_declaration)) is None:
            logger.debug("group=%s No api declaration %s found", group, api_declaration)
            return Response(status_code=HTTP_404_NOT_FOUND)

        return self._json_response(api_listing)

    def _json_response(self, obj: object) -> Response:
        return Response(
            content=self._codec.encode(obj),
            status_code=HTTP_200_OK,
            media_type=JSON_MEDIA_TYPE,
        )
