#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import json
from enum import Enum

import pytest

from pydantic import BaseModel, Field

from swagger1_docs import dto
from swagger1_docs.exceptions import DocumentationEncodingError
from swagger1_docs.json_codec import CodecExtension, JsonCodec, swagger_module


def test_encode_without_extensions_writes_null_fields() -> None:
    assert JsonCodec().encode(dto.ApiInfo(title="Petstore")) == (
        '{"title":"Petstore","description":"","termsOfServiceUrl":null,'
        '"contact":null,"license":null,"licenseUrl":null}'
    )


def test_swagger_module_omits_null_fields() -> None:
    assert (
        JsonCodec([swagger_module]).encode(dto.ApiInfo(title="Petstore"))
        == '{"title":"Petstore","description":""}'
    )


def test_swagger_module_renders_range_values() -> None:
    prop = dto.ModelProperty(
        type="integer",
        format="int32",
        allowable_values=dto.AllowableRangeValues(min="1", max="10"),
    )
    assert json.loads(JsonCodec([swagger_module]).encode(prop))["allowableValues"] == {
        "valueType": "RANGE",
        "min": "1",
        "max": "10",
    }
    assert json.loads(JsonCodec().encode(prop))["allowableValues"] == {"min": "1", "max": "10"}


def test_swagger_module_is_applied_once() -> None:
    codec = JsonCodec([swagger_module, swagger_module])
    assert not codec.mark_applied("swagger1")


def test_extensions_are_applied_once_in_order() -> None:
    calls: list[str] = []

    def extension(name: str) -> CodecExtension:
        return lambda codec: calls.append(name)

    codec = JsonCodec([extension("first"), extension("second")])
    codec.encode({"a": 1})
    codec.encode({"b": 2})

    assert calls == ["first", "second"]


def test_registered_serializer_applies_to_subclasses() -> None:
    class Base:
        pass

    class Derived(Base):
        pass

    codec = JsonCodec()
    codec.register_serializer(Base, lambda _obj: "base")

    assert codec.encode({"value": Derived()}) == '{"value":"base"}'


@pytest.mark.parametrize(
    "obj",
    [
        pytest.param(object(), id="unsupported object"),
        pytest.param({"value": float("nan")}, id="nan"),
        pytest.param({("a", "b"): 1}, id="tuple key"),
        pytest.param({1: "a", "1": "b"}, id="int key"),
        pytest.param({None: "c"}, id="none key"),
        pytest.param({"outer": {True: "d"}}, id="nested bool key"),
    ],
)
def test_encoding_failure(obj: object) -> None:
    with pytest.raises(DocumentationEncodingError, match="Could not write JSON") as excinfo:
        JsonCodec([swagger_module]).encode(obj)
    assert isinstance(excinfo.value.__cause__, (TypeError, ValueError))


def test_encoding_failure_on_circular_reference() -> None:
    circular: list[object] = []
    circular.append(circular)
    with pytest.raises(DocumentationEncodingError):
        JsonCodec().encode(circular)


class _Color(str, Enum):
    RED = "red"


class _Counter(int):
    pass


def test_registered_serializer_wins_over_json_types() -> None:
    codec = JsonCodec()
    codec.register_serializer(_Color, lambda color: {"color": color.value})
    codec.register_serializer(_Counter, lambda counter: f"#{int(counter)}")

    assert codec.encode({"value": _Color.RED, "count": _Counter(3), "plain": "red"}) == (
        '{"value":{"color":"red"},"count":"#3","plain":"red"}'
    )


def test_registered_serializer_applies_inside_dtos() -> None:
    codec = JsonCodec()
    codec.register_serializer(str, str.upper)

    assert codec.encode(dto.ApiListingReference(path="/pets")) == (
        '{"path":"/PETS","description":"","position":0}'
    )


def test_str_enum_keys_are_accepted() -> None:
    assert JsonCodec().encode({_Color.RED: 1}) == '{"red":1}'


def test_serialization_alias_is_used() -> None:
    class Listing(BaseModel):
        base_path: str = Field(serialization_alias="basePath")

    assert JsonCodec().encode(Listing(base_path="/")) == '{"basePath":"/"}'


def test_repeated_values_are_not_circular() -> None:
    shared = ["application/json"]
    assert JsonCodec().encode({"produces": shared, "consumes": shared}) == (
        '{"produces":["application/json"],"consumes":["application/json"]}'
    )


class _Headers(dict):
    pass


def test_registered_serializer_for_mapping_subclass() -> None:
    codec = JsonCodec()
    codec.register_serializer(_Headers, lambda headers: sorted(headers))

    assert codec.encode({"headers": _Headers(b=1, a=2)}) == '{"headers":["a","b"]}'
