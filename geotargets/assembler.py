"""
Assembly of tokenized rows into location entities.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from geotargets import rules
from geotargets.canonical import decompose
from geotargets.errors import FatalParseError
from geotargets.models import LocationEntity, LocationType

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[0-9]+")


def _parse_id(value: str, line_number: int) -> int:
    if not _ID_PATTERN.fullmatch(value) or int(value) <= 0:
        raise FatalParseError(f"invalid criteria id {value!r}.", line_number)
    return int(value)


def assemble(fields: Sequence[str], line_number: int) -> Optional[LocationEntity]:
    """
    Build the entity for one tokenized row.

    Returns None for rows that are excluded (unlisted target type, or a
    canonical name that does not nest under the row's name). Raises
    FatalParseError for rows that are structurally broken.
    """
    if len(fields) < rules.MIN_FIELDS:
        raise FatalParseError(
            f"expected at least {rules.MIN_FIELDS} fields, found {len(fields)}.",
            line_number,
        )

    entity_id = _parse_id(fields[rules.FIELD_ID], line_number)
    name = fields[rules.FIELD_NAME]
    canonical = fields[rules.FIELD_CANONICAL]
    country_code = fields[rules.FIELD_COUNTRY_CODE].lower()
    type_label = fields[rules.FIELD_TARGET_TYPE]

    location_type = LocationType.from_label(type_label)
    if location_type is None or not location_type.included:
        logger.debug("Skipping line %d: target type %r not considered", line_number, type_label)
        return None

    decomposed = decompose(name, canonical)
    if decomposed is None:
        logger.debug("Skipping line %d: canonical %r does not nest under %r", line_number, canonical, name)
        return None

    return LocationEntity(
        id=entity_id,
        name=name,
        canonical=canonical,
        region=decomposed.region,
        country=decomposed.country,
        country_code=country_code,
        type=location_type,
    )
