"""
Fixed rules of the geotargets dataset contract.

This file exists to keep the dataset layout explicit and in one place.
"""

HEADER_PREFIX = "Criteria ID"
DATASET_ENCODING = "utf-8-sig"  # a leading BOM is tolerated and dropped

# Positional columns of a tokenized row (3, the parent id, is not used)
FIELD_ID = 0
FIELD_NAME = 1
FIELD_CANONICAL = 2
FIELD_COUNTRY_CODE = 4
FIELD_TARGET_TYPE = 5
MIN_FIELDS = 6

CSV_HEADER = ("Id", "Name", "Canonical", "Region", "Country", "Country Code")
JSON_INDENT = 4
