"""
Decomposition of canonical names into region and country.

A canonical name is the ancestor path of a location, most specific first,
e.g. `Paris,Texas,United States`. Countries carry their own name as their
canonical name.
"""

from __future__ import annotations

from typing import Optional

from geotargets.models import LocationCanonical

SEPARATOR = ","
# Canonical names of this depth may lead with a segment that differs from the
# row's own name (metro / DMA style prefixes).
RECOVERABLE_SEPARATOR_COUNT = 2


def decompose(name: str, canonical: str) -> Optional[LocationCanonical]:
    """
    Derive the region (if any) and the country of a location.

    Returns None when the canonical name does not nest under `name`; callers
    drop such rows.
    """
    if name == canonical:
        return LocationCanonical(country=name)

    prefix = f"{name}{SEPARATOR}"
    if not canonical.startswith(prefix):
        if canonical.count(SEPARATOR) != RECOVERABLE_SEPARATOR_COUNT:
            return None
        name = canonical.split(SEPARATOR, 1)[0]
        prefix = f"{name}{SEPARATOR}"

    hierarchy = canonical[len(prefix):]
    region, sep, country = hierarchy.rpartition(SEPARATOR)
    if not country:
        return None
    if not sep:
        return LocationCanonical(country=country)

    return LocationCanonical(region=region or None, country=country)
