#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SWAGGER_VERSION = "1.2"


class _Dto(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AllowableListValues(_Dto):
    value_type: str = Field("LIST", alias="valueType")
    values: list[str] = Field(default_factory=list)


class AllowableRangeValues(_Dto):
    min: str
    max: str


AllowableValues = AllowableListValues | AllowableRangeValues


class Items(_Dto):
    type: str | None = None
    format: str | None = None
    ref: str | None = Field(None, alias="$ref")


class AuthorizationScope(_Dto):
    scope: str
    description: str = ""


class ApiKey(_Dto):
    type: Literal["apiKey"] = "apiKey"
    keyname: str
    pass_as: str = Field(alias="passAs")


class BasicAuth(_Dto):
    type: Literal["basicAuth"] = "basicAuth"


AuthorizationType = ApiKey | BasicAuth


class ApiInfo(_Dto):
    title: str
    description: str = ""
    terms_of_service_url: str | None = Field(None, alias="termsOfServiceUrl")
    contact: str | None = None
    license: str | None = None
    license_url: str | None = Field(None, alias="licenseUrl")


class ApiListingReference(_Dto):
    path: str
    description: str = ""
    position: int = 0


class ResourceListing(_Dto):
    api_version: str = Field(alias="apiVersion")
    swagger_version: str = Field(SWAGGER_VERSION, alias="swaggerVersion")
    apis: list[ApiListingReference] = Field(default_factory=list)
    authorizations: dict[str, AuthorizationType] = Field(default_factory=dict)
    info: ApiInfo | None = None


class ModelProperty(_Dto):
    type: str | None = None
    format: str | None = None
    ref: str | None = Field(None, alias="$ref")
    items: Items | None = None
    position: int = 0
    required: bool = False
    description: str | None = None
    allowable_values: AllowableValues | None = Field(None, alias="allowableValues")


class ModelDto(_Dto):
    id: str
    name: str
    qualified_type: str = Field(alias="qualifiedType")
    properties: dict[str, ModelProperty] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    description: str | None = None
    discriminator: str | None = None
    sub_types: list[str] = Field(default_factory=list, alias="subTypes")


class Parameter(_Dto):
    name: str
    description: str | None = None
    default_value: str | None = Field(None, alias="defaultValue")
    required: bool = False
    allow_multiple: bool = Field(False, alias="allowMultiple")
    type: str | None = None
    format: str | None = None
    ref: str | None = Field(None, alias="$ref")
    items: Items | None = None
    allowable_values: AllowableValues | None = Field(None, alias="allowableValues")
    param_type: str = Field(alias="paramType")
    param_access: str | None = Field(None, alias="paramAccess")


class ResponseMessage(_Dto):
    code: int
    message: str
    response_model: str | None = Field(None, alias="responseModel")


class Operation(_Dto):
    method: str
    summary: str = ""
    notes: str = ""
    type: str | None = None
    format: str | None = None
    ref: str | None = Field(None, alias="$ref")
    items: Items | None = None
    nickname: str
    position: int = 0
    produces: list[str] = Field(default_factory=list)
    consumes: list[str] = Field(default_factory=list)
    protocols: list[str] = Field(default_factory=list)
    authorizations: dict[str, list[AuthorizationScope]] = Field(default_factory=dict)
    parameters: list[Parameter] = Field(default_factory=list)
    response_messages: list[ResponseMessage] = Field(default_factory=list, alias="responseMessages")
    deprecated: bool = False


class ApiDescription(_Dto):
    path: str
    description: str = ""
    operations: list[Operation] = Field(default_factory=list)
    hidden: bool = False


class ApiListing(_Dto):
    api_version: str = Field(alias="apiVersion")
    swagger_version: str = Field(SWAGGER_VERSION, alias="swaggerVersion")
    base_path: str = Field(alias="basePath")
    resource_path: str = Field(alias="resourcePath")
    produces: list[str] = Field(default_factory=list)
    consumes: list[str] = Field(default_factory=list)
    protocols: list[str] = Field(default_factory=list)
    authorizations: dict[str, list[AuthorizationScope]] = Field(default_factory=dict)
    apis: list[ApiDescription] = Field(default_factory=list)
    models: dict[str, ModelDto] = Field(default_factory=dict)
    description: str = ""
    position: int = 0
