"""CLI entrypoints that parse measurements out of text."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from tqdm import tqdm

from ..config import get_settings
from ..parsing import parse_document
from ..quantities import as_fraction
from ..schemas import dump_document
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event

__all__ = ["parse_command", "scale_command"]


def _settings_logger(log_file: Optional[Path]):
    settings = get_settings()
    return configure_json_logger(log_file or settings.log_path, settings.log_level_number), settings


def parse_command(
    text: str = typer.Argument(..., help="Text containing measurements, e.g. '1 ½ cups flour'"),
    best: Optional[bool] = typer.Option(
        None, "--best/--no-best", help="Include the most natural rendering of each measurement"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
) -> None:
    """Print the measurements found in TEXT as JSON."""

    logger, settings = _settings_logger(log_file)
    include_best = settings.best_measure if best is None else best
    trace_id = log_event(logger, "parse.start", characters=len(text))

    document = parse_document(text)
    payload = dump_document(document, best=include_best).model_dump(mode="json", by_alias=True)

    log_event(logger, "parse.completed", trace_id=trace_id, tokens=len(document.tokens))
    flush_handlers(logger)
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def scale_command(
    input_path: Path = typer.Option(..., "--input", exists=True, dir_okay=False, help="JSONL with a 'text' field"),
    output_path: Path = typer.Option(..., "--output", dir_okay=False, help="Destination JSONL"),
    factor: str = typer.Option("1", "--factor", help="Exact scale factor, e.g. '2' or '3/2'"),
    text_field: str = typer.Option("text", "--text-field", help="Name of the field holding the text"),
    best: Optional[bool] = typer.Option(None, "--best/--no-best", help="Rewrite scaled measures in natural units"),
    description: Optional[bool] = typer.Option(
        None, "--description/--abbreviation", help="Spell unit names out instead of abbreviating them"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
) -> None:
    """Scale every measurement of a JSONL corpus by FACTOR."""

    try:
        scale = as_fraction(factor)
    except (TypeError, ValueError, ZeroDivisionError) as exc:
        raise typer.BadParameter(f"Invalid factor {factor!r}: {exc}") from exc

    logger, settings = _settings_logger(log_file)
    use_best = settings.best_measure if best is None else best
    use_description = settings.description_format if description is None else description
    trace_id = generate_trace_id()
    log_event(logger, "scale.start", trace_id=trace_id, input=str(input_path), factor=scale)

    records: List[Dict[str, Any]] = []
    with input_path.open("r", encoding="utf-8") as src:
        for line in src:
            if line.strip():
                records.append(json.loads(line))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    measurements = 0
    with output_path.open("w", encoding="utf-8") as dst:
        for record in tqdm(records, desc="Scaling recipes", unit="doc", disable=None):
            text = record.get(text_field)
            if not isinstance(text, str):
                log_event(logger, "scale.skipped", trace_id=trace_id, reason=f"missing '{text_field}'")
                dst.write(json.dumps(record, ensure_ascii=False) + "\n")
                continue
            document = parse_document(text)
            measurements += len(document.tokens)
            record = dict(record)
            record[text_field] = document.render(scale, best=use_best, description=use_description)
            dst.write(json.dumps(record, ensure_ascii=False) + "\n")

    log_event(
        logger,
        "scale.completed",
        trace_id=trace_id,
        documents=len(records),
        measurements=measurements,
        output=str(output_path),
    )
    flush_handlers(logger)
    typer.echo(
        json.dumps(
            {"output": str(output_path), "num_records": len(records), "measurements": measurements},
            indent=2,
            ensure_ascii=False,
        )
    )
