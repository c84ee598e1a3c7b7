"""CLI commands converting quantities between units."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import typer

from ..errors import UnknownUnitError
from ..parsing import parse_number, resolve_unit
from ..quantities import UNITFUL_UNITS, Dimension, Magnitude, Unit, as_fraction, best_rendering
from ..schemas import dump_magnitude, dump_measure

__all__ = ["convert_command", "units_command"]


def _resolve(word: str) -> Unit:
    try:
        unit = resolve_unit(word, strict=True)
    except UnknownUnitError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return unit


def convert_command(
    value: str = typer.Argument(..., help="Quantity such as '1 3/4', '0.5' or '¾'"),
    unit: str = typer.Argument(..., help="Unit word or abbreviation, e.g. 'tsp'"),
    to: Optional[str] = typer.Option(None, "--to", help="Target unit; omit to list the best renderings"),
    scale: str = typer.Option("1", "--scale", help="Exact factor applied before converting"),
    description: bool = typer.Option(False, "--description", help="Spell unit names out"),
) -> None:
    """Convert VALUE UNIT into another unit, or pick its most natural renderings."""

    number = parse_number(value.strip())
    if number is None or number.rest.text.strip():
        raise typer.BadParameter(f"Not a number: {value!r}")
    try:
        factor = as_fraction(scale)
    except (TypeError, ValueError, ZeroDivisionError) as exc:
        raise typer.BadParameter(f"Invalid scale {scale!r}: {exc}") from exc

    source_unit = _resolve(unit)
    magnitude = Magnitude.single(number.value, source_unit) * factor
    payload: Dict[str, Any] = {"magnitude": dump_magnitude(magnitude).model_dump(mode="json")}

    if to is not None:
        target_unit = _resolve(to)
        if source_unit.dimension.is_reading and target_unit is not source_unit:
            raise typer.BadParameter(f"{source_unit.singular} readings are not converted to {target_unit.singular}")
        try:
            measure = magnitude.measure(target_unit)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        payload["measure"] = dump_measure(measure).model_dump(mode="json", by_alias=True)
        payload["text"] = measure.format(description)
    else:
        written = magnitude.measure(source_unit)
        if source_unit.dimension.is_reading:
            measures, best = [written], written
        else:
            measures, best = magnitude.best_measures(), best_rendering(written)
        payload["measures"] = [dump_measure(m).model_dump(mode="json", by_alias=True) for m in measures]
        payload["text"] = best.format(description) if best is not None else None

    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def units_command(
    dimension: Optional[Dimension] = typer.Option(None, "--dimension", help="Only list units of this dimension"),
) -> None:
    """List the known units with their aliases and multiples."""

    rows: List[Dict[str, Any]] = []
    for unit in UNITFUL_UNITS:
        if dimension is not None and unit.dimension is not dimension:
            continue
        rows.append(
            {
                "name": unit.name.lower(),
                "dimension": unit.dimension.value,
                "abbreviation": unit.abbreviation,
                "aliases": list(unit.aliases),
                "multiple": str(unit.multiple),
                "common": unit.is_common,
            }
        )
    typer.echo(json.dumps(rows, indent=2, ensure_ascii=False))
