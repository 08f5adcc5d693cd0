#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Service model of the API documentation

These records are built by whatever scans the documented application and are handed to the
DocumentationCache. Nothing in this package creates or modifies them; they are only read and
mapped to the Swagger 1.2 DTOs in swagger1_docs.dto.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ModelRef:
    type: str
    item_type: str | None = None

    @property
    def is_collection(self) -> bool:
        return self.item_type is not None


@dataclass(frozen=True)
class AllowableListValues:
    values: Sequence[str]
    value_type: str = "LIST"


@dataclass(frozen=True)
class AllowableRangeValues:
    min: str
    max: str


AllowableValues = AllowableListValues | AllowableRangeValues


@dataclass(frozen=True)
class AuthorizationScope:
    scope: str
    description: str = ""


@dataclass(frozen=True)
class SecurityReference:
    reference: str
    scopes: Sequence[AuthorizationScope] = ()


@dataclass(frozen=True)
class ApiKey:
    name: str
    key_name: str
    pass_as: str = "header"


@dataclass(frozen=True)
class BasicAuth:
    name: str


SecurityScheme = ApiKey | BasicAuth


@dataclass(frozen=True)
class ApiInfo:
    title: str
    description: str = ""
    terms_of_service_url: str | None = None
    contact: str | None = None
    license: str | None = None
    license_url: str | None = None


@dataclass(frozen=True)
class ApiListingReference:
    path: str
    description: str = ""
    position: int = 0


@dataclass(frozen=True)
class ResourceListing:
    api_version: str
    apis: Sequence[ApiListingReference] = ()
    security_schemes: Sequence[SecurityScheme] = ()
    info: ApiInfo | None = None


@dataclass(frozen=True)
class ModelProperty:
    name: str
    model_ref: ModelRef
    position: int = 0
    required: bool = False
    description: str | None = None
    allowable_values: AllowableValues | None = None


@dataclass(frozen=True)
class Model:
    id: str
    name: str
    qualified_type: str
    properties: Mapping[str, ModelProperty] = field(default_factory=dict)
    description: str | None = None
    discriminator: str | None = None
    sub_types: Sequence[str] = ()


@dataclass(frozen=True)
class Parameter:
    name: str
    model_ref: ModelRef
    param_type: str
    description: str | None = None
    default_value: str | None = None
    required: bool = False
    allow_multiple: bool = False
    allowable_values: AllowableValues | None = None
    param_access: str | None = None


@dataclass(frozen=True)
class ResponseMessage:
    code: int
    message: str
    response_model: ModelRef | None = None


@dataclass(frozen=True)
class Operation:
    method: str
    unique_id: str
    response_model: ModelRef = ModelRef("void")
    summary: str = ""
    notes: str = ""
    position: int = 0
    produces: Sequence[str] = ()
    consumes: Sequence[str] = ()
    protocols: Sequence[str] = ()
    security_references: Sequence[SecurityReference] = ()
    parameters: Sequence[Parameter] = ()
    response_messages: Sequence[ResponseMessage] = ()
    deprecated: bool = False


@dataclass(frozen=True)
class ApiDescription:
    path: str
    description: str = ""
    operations: Sequence[Operation] = ()
    hidden: bool = False


@dataclass(frozen=True)
class ApiListing:
    api_version: str
    base_path: str
    resource_path: str
    produces: Sequence[str] = ()
    consumes: Sequence[str] = ()
    protocols: Sequence[str] = ()
    security_references: Sequence[SecurityReference] = ()
    apis: Sequence[ApiDescription] = ()
    models: Mapping[str, Model] = field(default_factory=dict)
    description: str = ""
    position: int = 0


@dataclass(frozen=True)
class Documentation:
    group_name: str
    resource_listing: ResourceListing
    api_listings: Mapping[str, ApiListing] = field(default_factory=dict)
