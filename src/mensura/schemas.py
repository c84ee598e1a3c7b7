"""Pydantic models used to serialize measures, magnitudes and tokens.

Rational values travel as strings (``"3/4"``, ``"12"``) so that no precision
is lost through JSON.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Annotated, Any, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .parsing.document import Document
from .parsing.tokens import MeasureToken
from .quantities import (
    AnyUnit,
    Dimension,
    Magnitude,
    Measure,
    MultiMeasure,
    RangeMagnitude,
    RangeMeasure,
    SingleMagnitude,
    SingleMeasure,
    Unit,
    best_rendering,
    lookup_unit,
)

__all__ = [
    "DocumentModel",
    "MagnitudeModel",
    "MeasureModel",
    "TokenModel",
    "UnitModel",
    "dump_document",
    "dump_magnitude",
    "dump_measure",
    "dump_token",
    "dump_unit",
    "load_magnitude",
    "load_measure",
    "load_unit",
]


def _check_rational(value: str) -> str:
    try:
        Fraction(value)
    except (ValueError, ZeroDivisionError) as exc:
        raise ValueError(f"'{value}' is not an exact rational") from exc
    return value


class UnitModel(BaseModel):
    """Unit reference: registered name, or the literal word of a unitless unit."""

    name: str = Field(..., description="Registered unit name or unitless word")
    dimension: Dimension
    abbreviation: Optional[str] = Field(default=None, description="Display abbreviation")

    model_config = ConfigDict(frozen=True)


class SingleMeasureModel(BaseModel):
    kind: Literal["single"] = "single"
    value: str = Field(..., description="Exact value, e.g. '3/4'")
    unit: UnitModel
    text: Optional[str] = Field(default=None, description="Abbreviated rendering")

    @field_validator("value")
    @classmethod
    def _value_rational(cls, value: str) -> str:
        return _check_rational(value)


class MultiMeasureModel(BaseModel):
    kind: Literal["multi"] = "multi"
    measures: List[SingleMeasureModel] = Field(..., min_length=1)
    text: Optional[str] = None


class RangeMeasureModel(BaseModel):
    kind: Literal["range"] = "range"
    from_: SingleMeasureModel = Field(..., alias="from")
    to: SingleMeasureModel
    text: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


MeasureModel = Annotated[
    Union[SingleMeasureModel, MultiMeasureModel, RangeMeasureModel],
    Field(discriminator="kind"),
]


class SingleMagnitudeModel(BaseModel):
    kind: Literal["single"] = "single"
    base_value: str
    dimension: Dimension

    @field_validator("base_value")
    @classmethod
    def _base_value_rational(cls, value: str) -> str:
        return _check_rational(value)


class RangeMagnitudeModel(BaseModel):
    kind: Literal["range"] = "range"
    from_base_value: str
    to_base_value: str
    dimension: Dimension

    @field_validator("from_base_value", "to_base_value")
    @classmethod
    def _base_values_rational(cls, value: str) -> str:
        return _check_rational(value)


MagnitudeModel = Annotated[
    Union[SingleMagnitudeModel, RangeMagnitudeModel],
    Field(discriminator="kind"),
]


class TokenModel(BaseModel):
    """A parsed measurement, ready for JSON output."""

    measure: SingleMeasureModel
    magnitude: SingleMagnitudeModel
    number_range: Tuple[int, int]
    unit_range: Tuple[int, int]
    raw: str
    best: Optional[MeasureModel] = None

    @field_validator("number_range", "unit_range")
    @classmethod
    def _range_ordered(cls, value: Tuple[int, int]) -> Tuple[int, int]:
        start, end = value
        if start < 0 or end < start:
            raise ValueError(f"invalid character range {value}")
        return value


class DocumentModel(BaseModel):
    raw: str
    tokens: List[TokenModel] = Field(default_factory=list)


_MEASURE_ADAPTER: TypeAdapter[Any] = TypeAdapter(MeasureModel)
_MAGNITUDE_ADAPTER: TypeAdapter[Any] = TypeAdapter(MagnitudeModel)


def dump_unit(unit: AnyUnit) -> UnitModel:
    name = unit.name.lower() if isinstance(unit, Unit) else unit.name
    return UnitModel(name=name, dimension=unit.dimension, abbreviation=unit.abbreviation)


def load_unit(model: UnitModel | Mapping[str, Any]) -> AnyUnit:
    if not isinstance(model, UnitModel):
        model = UnitModel.model_validate(model)
    unit = lookup_unit(model.name, model.dimension)
    if unit.dimension is not model.dimension:
        raise ValueError(f"Unit '{model.name}' is not a {model.dimension.value} unit")
    return unit


def _dump_single(measure: SingleMeasure) -> SingleMeasureModel:
    return SingleMeasureModel(value=str(measure.value), unit=dump_unit(measure.unit), text=str(measure))


def dump_measure(measure: Measure) -> Union[SingleMeasureModel, MultiMeasureModel, RangeMeasureModel]:
    if isinstance(measure, SingleMeasure):
        return _dump_single(measure)
    if isinstance(measure, MultiMeasure):
        return MultiMeasureModel(measures=[_dump_single(part) for part in measure.measures], text=str(measure))
    if isinstance(measure, RangeMeasure):
        return RangeMeasureModel(from_=_dump_single(measure.from_), to=_dump_single(measure.to), text=str(measure))
    raise TypeError(f"Unsupported measure: {measure!r}")


def _load_single(model: SingleMeasureModel) -> SingleMeasure:
    return SingleMeasure(Fraction(model.value), load_unit(model.unit))


def load_measure(payload: BaseModel | Mapping[str, Any]) -> Measure:
    """Rebuild a measure from its model or from a plain ``dict``."""

    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    model = _MEASURE_ADAPTER.validate_python(payload)
    if isinstance(model, SingleMeasureModel):
        return _load_single(model)
    if isinstance(model, MultiMeasureModel):
        return MultiMeasure(tuple(_load_single(part) for part in model.measures))
    return RangeMeasure(_load_single(model.from_), _load_single(model.to))


def dump_magnitude(magnitude: Magnitude) -> Union[SingleMagnitudeModel, RangeMagnitudeModel]:
    if isinstance(magnitude, SingleMagnitude):
        return SingleMagnitudeModel(base_value=str(magnitude.base_value), dimension=magnitude.dimension)
    if isinstance(magnitude, RangeMagnitude):
        return RangeMagnitudeModel(
            from_base_value=str(magnitude.from_base_value),
            to_base_value=str(magnitude.to_base_value),
            dimension=magnitude.dimension,
        )
    raise TypeError(f"Unsupported magnitude: {magnitude!r}")


def load_magnitude(payload: BaseModel | Mapping[str, Any]) -> Magnitude:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    model = _MAGNITUDE_ADAPTER.validate_python(payload)
    if isinstance(model, SingleMagnitudeModel):
        return SingleMagnitude(Fraction(model.base_value), model.dimension)
    return RangeMagnitude(Fraction(model.from_base_value), Fraction(model.to_base_value), model.dimension)


def dump_token(token: MeasureToken, *, best: bool = False) -> TokenModel:
    best_model = None
    if best:
        chosen = best_rendering(token.measure)
        best_model = dump_measure(chosen) if chosen is not None else None
    return TokenModel(
        measure=_dump_single(token.measure),
        magnitude=dump_magnitude(token.magnitude),
        number_range=token.number_range,
        unit_range=token.unit_range,
        raw=token.raw,
        best=best_model,
    )


def dump_document(document: Document, *, best: bool = False) -> DocumentModel:
    return DocumentModel(raw=document.raw, tokens=[dump_token(token, best=best) for token in document.tokens])
