#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Mapping, Sequence
from typing import Any

from swagger1_docs import dto, models

_PRIMITIVES: Mapping[str, tuple[str, str | None]] = {
    "int": ("integer", "int32"),
    "long": ("integer", "int64"),
    "float": ("number", "float"),
    "double": ("number", "double"),
    "string": ("string", None),
    "boolean": ("boolean", None),
    "byte": ("string", "byte"),
    "date": ("string", "date"),
    "date-time": ("string", "date-time"),
    "void": ("void", None),
}


def _items(type_name: str) -> dto.Items:
    """
    >>> _items("long")
    Items(type='integer', format='int64', ref=None)
    >>> _items("Pet")
    Items(type=None, format=None, ref='Pet')
    """
    if (primitive := _PRIMITIVES.get(type_name)) is not None:
        return dto.Items(type=primitive[0], format=primitive[1])
    return dto.Items(ref=type_name)


def _data_type(model_ref: models.ModelRef, *, reference_models: bool) -> dict[str, Any]:
    """Fields describing a data type, as shared by properties, parameters and operations

    Model types are written as "$ref" on model properties and as plain "type" everywhere else.

    >>> _data_type(models.ModelRef("int"), reference_models=False)
    {'type': 'integer', 'format': 'int32'}
    >>> _data_type(models.ModelRef("Pet"), reference_models=True)
    {'ref': 'Pet'}
    >>> _data_type(models.ModelRef("List", item_type="string"), reference_models=False)
    {'type': 'array', 'items': Items(type='string', format=None, ref=None)}
    """
    if model_ref.is_collection:
        return {"type": "array", "items": _items(model_ref.item_type)}
    if (primitive := _PRIMITIVES.get(model_ref.type)) is not None:
        type_name, type_format = primitive
        return {"type": type_name, "format": type_format} if type_format else {"type": type_name}
    return {"ref": model_ref.type} if reference_models else {"type": model_ref.type}


def _response_model_name(model_ref: models.ModelRef | None) -> str | None:
    if model_ref is None:
        return None
    return model_ref.item_type if model_ref.is_collection else model_ref.type


class ServiceModelToSwaggerMapper:
    """Maps the service model to the Swagger 1.2 wire representation"""

    def to_swagger_resource_listing(self, listing: models.ResourceListing) -> dto.ResourceListing:
        return dto.ResourceListing(
            api_version=listing.api_version,
            apis=[self.to_swagger_api_listing_reference(ref) for ref in listing.apis],
            authorizations={
                scheme.name: self.to_swagger_authorization_type(scheme)
                for scheme in listing.security_schemes
            },
            info=None if listing.info is None else self.to_swagger_api_info(listing.info),
        )

    def to_swagger_api_listing_reference(
        self, reference: models.ApiListingReference
    ) -> dto.ApiListingReference:
        return dto.ApiListingReference(
            path=reference.path,
            description=reference.description,
            position=reference.position,
        )

    def to_swagger_api_info(self, info: models.ApiInfo) -> dto.ApiInfo:
        return dto.ApiInfo(
            title=info.title,
            description=info.description,
            terms_of_service_url=info.terms_of_service_url,
            contact=info.contact,
            license=info.license,
            license_url=info.license_url,
        )

    def to_swagger_authorization_type(self, scheme: models.SecurityScheme) -> dto.AuthorizationType:
        if isinstance(scheme, models.ApiKey):
            return dto.ApiKey(keyname=scheme.key_name, pass_as=scheme.pass_as)
        return dto.BasicAuth()

    def to_swagger_authorizations(
        self, references: Sequence[models.SecurityReference]
    ) -> dict[str, list[dto.AuthorizationScope]]:
        return {
            reference.reference: [
                dto.AuthorizationScope(scope=scope.scope, description=scope.description)
                for scope in reference.scopes
            ]
            for reference in references
        }

    def to_swagger_allowable_values(
        self, allowable_values: models.AllowableValues | None
    ) -> dto.AllowableValues | None:
        if allowable_values is None:
            return None
        if isinstance(allowable_values, models.AllowableRangeValues):
            return dto.AllowableRangeValues(min=allowable_values.min, max=allowable_values.max)
        return dto.AllowableListValues(
            value_type=allowable_values.value_type,
            values=list(allowable_values.values),
        )

    def to_swagger_api_listing(self, listing: models.ApiListing) -> dto.ApiListing:
        return dto.ApiListing(
            api_version=listing.api_version,
            base_path=listing.base_path,
            resource_path=listing.resource_path,
            produces=list(listing.produces),
            consumes=list(listing.consumes),
            protocols=list(listing.protocols),
            authorizations=self.to_swagger_authorizations(listing.security_references),
            apis=[self.to_swagger_api_description(api) for api in listing.apis],
            models={
                model_id: self.to_swagger_model(model) for model_id, model in listing.models.items()
            },
            description=listing.description,
            position=listing.position,
        )

    def to_swagger_api_description(self, description: models.ApiDescription) -> dto.ApiDescription:
        return dto.ApiDescription(
            path=description.path,
            description=description.description,
            operations=[self.to_swagger_operation(op) for op in description.operations],
            hidden=description.hidden,
        )

    def to_swagger_operation(self, operation: models.Operation) -> dto.Operation:
        return dto.Operation(
            method=operation.method,
            summary=operation.summary,
            notes=operation.notes,
            nickname=operation.unique_id,
            position=operation.position,
            produces=list(operation.produces),
            consumes=list(operation.consumes),
            protocols=list(operation.protocols),
            authorizations=self.to_swagger_authorizations(operation.security_references),
            parameters=[self.to_swagger_parameter(p) for p in operation.parameters],
            response_messages=[
                self.to_swagger_response_message(m) for m in operation.response_messages
            ],
            deprecated=operation.deprecated,
            **_data_type(operation.response_model, reference_models=False),
        )

    def to_swagger_parameter(self, parameter: models.Parameter) -> dto.Parameter:
        return dto.Parameter(
            name=parameter.name,
            description=parameter.description,
            default_value=parameter.default_value,
            required=parameter.required,
            allow_multiple=parameter.allow_multiple,
            allowable_values=self.to_swagger_allowable_values(parameter.allowable_values),
            param_type=parameter.param_type,
            param_access=parameter.param_access,
            **_data_type(parameter.model_ref, reference_models=False),
        )

    def to_swagger_response_message(self, message: models.ResponseMessage) -> dto.ResponseMessage:
        return dto.ResponseMessage(
            code=message.code,
            message=message.message,
            response_model=_response_model_name(message.response_model),
        )

    def to_swagger_model(self, model: models.Model) -> dto.ModelDto:
        properties = sorted(model.properties.items(), key=lambda item: item[1].position)
        return dto.ModelDto(
            id=model.id,
            name=model.name,
            qualified_type=model.qualified_type,
            properties={name: self.to_swagger_model_property(prop) for name, prop in properties},
            required=[name for name, prop in properties if prop.required],
            description=model.description,
            discriminator=model.discriminator,
            sub_types=list(model.sub_types),
        )

    def to_swagger_model_property(self, prop: models.ModelProperty) -> dto.ModelProperty:
        return dto.ModelProperty(
            position=prop.position,
            required=prop.required,
            description=prop.description,
            allowable_values=self.to_swagger_allowable_values(prop.allowable_values),
            **_data_type(prop.model_ref, reference_models=True),
        )


def to_api_listing_dtos(
    mapper: ServiceModelToSwaggerMapper,
    api_listings: Mapping[str, models.ApiListing],
) -> dict[str, dto.ApiListing]:
    return {
        declaration: mapper.to_swagger_api_listing(listing)
        for declaration, listing in api_listings.items()
    }
