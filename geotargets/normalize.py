"""
Dataset-level parsing.

Responsibilities:
- decoding uploaded bytes (UTF-8 only, encoding guess reported on failure)
- header check
- line splitting with physical line numbers
- running tokenizer + assembler over every line, in order
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Tuple

from charset_normalizer import from_bytes

from geotargets import rules
from geotargets.assembler import assemble
from geotargets.config import Settings, get_settings
from geotargets.errors import (
    DatasetEncodingError,
    EmptyDatasetError,
    MalformedDatasetError,
)
from geotargets.models import LocationEntity
from geotargets.tokenizer import tokenize

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def decode_dataset(raw: bytes) -> str:
    """
    Decode dataset bytes as UTF-8, dropping a leading BOM.

    Other encodings are not transcoded. When decoding fails, charset-normalizer
    is asked for its best guess so the error says what the file looks like.
    """
    try:
        return raw.decode(rules.DATASET_ENCODING)
    except UnicodeDecodeError as exc:
        match = from_bytes(raw).best()
        guess = match.encoding if match is not None else "unknown"
        raise DatasetEncodingError(
            f"Dataset is not valid UTF-8 (byte {exc.start}); detected encoding: {guess}."
        ) from exc


def validate_header(content: str) -> None:
    if not content.startswith(rules.HEADER_PREFIX):
        first_line = content.split("\n", 1)[0].strip()
        raise MalformedDatasetError(
            f"Expected a header starting with {rules.HEADER_PREFIX!r}, got {first_line[:80]!r}.",
            1,
        )


def _data_lines(content: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, line) for every non-empty line after the header.

    Line numbers are 1-based and count the header as line 1.
    """
    newline = content.find("\n")
    if newline < 0:
        return

    body = content[newline + 1:].rstrip()
    for index, line in enumerate(_LINE_BREAK.split(body)):
        if line:
            yield index + 2, line


def parse_location_entities(content: str) -> List[LocationEntity]:
    """
    Parse decoded dataset text into entities, preserving input order.

    Raises FatalParseError (or a subclass) on the first broken line, and
    EmptyDatasetError when nothing survives filtering.
    """
    entities: List[LocationEntity] = []
    skipped = 0

    for line_number, line in _data_lines(content):
        entity = assemble(tokenize(line), line_number)
        if entity is None:
            skipped += 1
            continue
        entities.append(entity)

    if not entities:
        raise EmptyDatasetError("No entities available in the dataset.")

    logger.info("Parsed %d entities (%d rows skipped)", len(entities), skipped)
    return entities


def normalize_dataset(raw: bytes, settings: Optional[Settings] = None) -> List[LocationEntity]:
    """
    Decode, check and parse a raw dataset.
    """
    settings = settings or get_settings()
    logger.info("Dataset received (%.2f MiB)", len(raw) / 1048576)

    content = decode_dataset(raw)
    if settings.require_header:
        validate_header(content)

    return parse_location_entities(content)
