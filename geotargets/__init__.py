"""
geotargets: parsing and normalization of geotargeting datasets.
"""

from geotargets.assembler import assemble
from geotargets.canonical import decompose
from geotargets.errors import FatalParseError
from geotargets.models import LocationCanonical, LocationEntity, LocationType
from geotargets.normalize import normalize_dataset, parse_location_entities
from geotargets.tokenizer import tokenize

__all__ = [
    "FatalParseError",
    "LocationCanonical",
    "LocationEntity",
    "LocationType",
    "assemble",
    "decompose",
    "normalize_dataset",
    "parse_location_entities",
    "tokenize",
]
