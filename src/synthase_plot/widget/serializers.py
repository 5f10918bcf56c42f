"""Serializers: convert Python objects to JS-transferable formats."""

from __future__ import annotations

import json

from ..config import PlotConfig


def serialize_details(details: dict[str, dict]) -> str:
    """Serialize {``parent:index``: detail dict} as a JSON string."""
    return json.dumps(details)


def serialize_config(config: PlotConfig) -> str:
    """Serialize the browser-relevant config (camelCase keys) as JSON."""
    return json.dumps(config.to_dict())


def parse_event(payload: str) -> dict | None:
    """Decode an interaction event sent from JS; None for empty payloads."""
    data = json.loads(payload or "{}")
    if not data or "type" not in data:
        return None
    if data["type"] == "remove" and "row" not in data:
        raise ValueError(f"Remove event without a 'row': {payload}")
    if data["type"] == "recolor" and not {"domainType", "colour"} <= data.keys():
        raise ValueError(f"Recolor event needs 'domainType' and 'colour': {payload}")
    return data
