"""
Bucket grouping and text rendering of the output files.

Only the text is produced here; where it is written is up to the caller.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Dict, Iterable, List, Sequence

from geotargets import rules
from geotargets.models import LocationEntity, LocationType


def group_by_bucket(entities: Iterable[LocationEntity]) -> Dict[str, List[LocationEntity]]:
    """
    Group entities by output bucket. Every bucket is present, even if empty,
    and input order is kept inside each bucket.
    """
    buckets: Dict[str, List[LocationEntity]] = {
        location_type.bucket: [] for location_type in LocationType.included_types()
    }
    for entity in entities:
        buckets[entity.type.bucket].append(entity)
    return buckets


def bucket_counts(buckets: Dict[str, List[LocationEntity]]) -> Dict[str, int]:
    return {name: len(entities) for name, entities in buckets.items()}


def render_csv(entities: Sequence[LocationEntity]) -> str:
    outp = io.StringIO(newline="")
    outp.write(",".join(rules.CSV_HEADER) + "\n")

    writer = csv.writer(outp, delimiter=",", quoting=csv.QUOTE_ALL, lineterminator="\n")
    for entity in entities:
        writer.writerow([
            entity.id,
            entity.name,
            entity.canonical,
            entity.region or "",
            entity.country,
            entity.country_code,
        ])

    return outp.getvalue()


def render_json(entities: Sequence[LocationEntity]) -> str:
    return json.dumps(
        [entity.to_output() for entity in entities],
        indent=rules.JSON_INDENT,
        ensure_ascii=False,
    )
