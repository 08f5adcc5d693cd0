#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import json
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from swagger1_docs import dto
from swagger1_docs.exceptions import DocumentationEncodingError

Serializer = Callable[[Any], Any]
CodecExtension = Callable[["JsonCodec"], None]


class JsonCodec:
    """JSON encoder for the documentation DTOs

    DTOs are written field by field under their aliases, so a serializer registered for a type
    also applies when a value of that type is nested inside a DTO. Extensions are applied once,
    in order, when the codec is created.
    """

    def __init__(self, extensions: Iterable[CodecExtension] = ()) -> None:
        self.omit_none = False
        self._serializers: dict[type, Serializer] = {}
        self._applied: set[str] = set()
        for extension in extensions:
            extension(self)

    def register_serializer(self, type_: type, serializer: Serializer) -> None:
        self._serializers[type_] = serializer

    def mark_applied(self, extension_name: str) -> bool:
        """Remember an extension by name, returns False if it was applied before"""
        if extension_name in self._applied:
            return False
        self._applied.add(extension_name)
        return True

    def encode(self, obj: object) -> str:
        try:
            return json.dumps(self._prepare(obj, set()), allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise DocumentationEncodingError(f"Could not write JSON: {e}") from e

    def _prepare(self, obj: object, path: set[int], serialized: bool = False) -> Any:
        """Plain JSON data for obj, registered serializers applied first

        Serializers take precedence over the JSON types, so subclasses of str, int or dict can be
        rendered differently. The output of a serializer is not serialized again, only the values
        nested in it are. path holds the ids of the containers currently being walked.
        """
        if not serialized:
            for type_ in type(obj).__mro__:
                if (serializer := self._serializers.get(type_)) is not None:
                    return self._prepare(serializer(obj), path, serialized=True)
        if obj is None or isinstance(obj, (str, int, float)):
            return obj
        if id(obj) in path:
            raise ValueError("Circular reference detected")
        path.add(id(obj))
        try:
            if isinstance(obj, BaseModel):
                return {key: self._prepare(value, path) for key, value in self._fields(obj)}
            if isinstance(obj, Mapping):
                return {self._key(key): self._prepare(value, path) for key, value in obj.items()}
            if isinstance(obj, (list, tuple)):
                return [self._prepare(value, path) for value in obj]
        finally:
            path.discard(id(obj))
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    @staticmethod
    def _key(key: object) -> str:
        # no conversion: 1 and "1" would end up as the same JSON key
        if not isinstance(key, str):
            raise TypeError(f"Keys must be str, not {type(key).__name__}")
        return key

    def _fields(self, model: BaseModel) -> Iterator[tuple[str, Any]]:
        for name, field in type(model).model_fields.items():
            if (value := getattr(model, name)) is None and self.omit_none:
                continue
            yield field.serialization_alias or field.alias or name, value


def _allowable_list_values(values: dto.AllowableListValues) -> dict[str, Any]:
    return {"valueType": values.value_type, "values": values.values}


def _allowable_range_values(values: dto.AllowableRangeValues) -> dict[str, Any]:
    return {"valueType": "RANGE", "min": values.min, "max": values.max}


def swagger_module(codec: JsonCodec) -> None:
    """Swagger 1.2 rendering: no null fields, tagged allowable values

    Applying it more than once to the same codec has no further effect.
    """
    if not codec.mark_applied("swagger1"):
        return
    codec.omit_none = True
    codec.register_serializer(dto.AllowableListValues, _allowable_list_values)
    codec.register_serializer(dto.AllowableRangeValues, _allowable_range_values)
