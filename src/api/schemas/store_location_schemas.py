# This file defines request and response schemas for the store-location query endpoint.
# It exists so the wire contract for (k, grid) queries and their results is explicit and typed.
# Request fields are loosely typed so content checks happen in the core validator, not in pydantic.
# The examples schema mirrors the worked examples catalog so clients can self-test.

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.api.schemas.common import EnvelopeFields


class StoreLocationRequestV1(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    k: Any | None = Field(
        default=None,
        description="Maximum allowed grid distance from a store to every house, in [1, 800].",
        examples=[2],
    )
    grid: Any | None = Field(
        default=None,
        validation_alias=AliasChoices("grid", "matrix"),
        description="Rectangular N x M array of 0 (empty plot) and 1 (house), N and M in [2, 400].",
        examples=[[[0, 0, 0, 0], [0, 0, 1, 0], [1, 0, 0, 1]]],
    )


class LocationV1(BaseModel):
    row: int
    col: int


class StoreLocationResultV1(BaseModel):
    count: int = Field(ge=0)
    locations: list[LocationV1]
    elapsed: float = Field(ge=0, description="Wall-clock computation time in milliseconds.")


class StoreLocationResponseV1(EnvelopeFields):
    data: StoreLocationResultV1


class ExampleRequestV1(BaseModel):
    k: int
    grid: list[list[int]]


class ExampleExpectedResultV1(BaseModel):
    count: int
    locations: list[LocationV1]


class WorkedExampleV1(BaseModel):
    description: str
    request: ExampleRequestV1
    expected_result: ExampleExpectedResultV1


class ExampleListResponseV1(EnvelopeFields):
    data: list[WorkedExampleV1]
