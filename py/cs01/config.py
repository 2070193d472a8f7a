"""Serialize nested config mappings into git-style INI text."""

import json
from collections.abc import Mapping
from typing import Any

from .types import InvalidConfigError


def serialize(config: Any) -> str:
    """Convert a section -> subsection -> setting mapping to INI text.

    An empty subsection name means the settings belong to the section
    itself, so ``{"core": {"": {"bare": False}}}`` becomes::

        [core]
          bare = false

    Named subsections are quoted: ``[remote "origin"]``. Sections and
    settings are emitted in insertion order.
    """
    if not isinstance(config, Mapping) or len(config) == 0:
        raise InvalidConfigError("Invalid config: must be a non-empty mapping")

    lines = []
    for section, subsections in config.items():
        if not isinstance(subsections, Mapping):
            raise InvalidConfigError(
                f"Invalid section '{section}': must contain subsection mappings"
            )

        for subsection, settings in subsections.items():
            header = _format_header(section, subsection)
            if not isinstance(settings, Mapping):
                raise InvalidConfigError(
                    f"Invalid settings for {header}: must be a mapping"
                )

            lines.append(header)
            for key, value in settings.items():
                lines.append(f"  {key} = {_format_value(header, key, value)}")

    return ''.join(line + '\n' for line in lines)


def _format_header(section: str, subsection: str) -> str:
    if subsection == '':
        return f"[{section}]"
    return f'[{section} "{subsection}"]'


def _format_value(header: str, key: str, value: Any) -> str:
    # Strings stay unquoted; everything else uses its compact JSON form,
    # which gives true/false for booleans and plain decimals for numbers.
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(',', ':'))
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(
            f"Invalid value for '{key}' in {header}: {e}"
        ) from e
