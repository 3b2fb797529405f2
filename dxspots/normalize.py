# dxspots/normalize.py
from __future__ import annotations

import datetime as dt
import hashlib
import json
import logging
from typing import Union

from dateutil.relativedelta import relativedelta
from pydantic import ValidationError

from .config import MAX_LINE_LENGTH
from .fields import FieldConversionError, clean_line
from .models import MalformedField, Spot, Unrecognized
from .parsers import match_line

logger = logging.getLogger(__name__)

ParseResult = Union[Spot, Unrecognized, MalformedField]

# Fields that identify a spot regardless of which cluster relayed it
_KEY_FIELDS = {"kind", "spotter", "spotted", "frequency", "time", "reporter", "originator", "sender", "message"}


def parse(line: str) -> ParseResult:
    """
    Classify one cluster line and extract its spot.

    Returns the spot model on success, ``Unrecognized`` when no rule matches
    and ``MalformedField`` when a rule matched but a capture failed to
    convert. Never raises for string input.
    """
    cleaned = clean_line(line)
    if len(cleaned) > MAX_LINE_LENGTH:
        logger.debug("Line longer than %d characters left unmatched", MAX_LINE_LENGTH)
        return Unrecognized(line=line)

    match = match_line(cleaned)
    if match is None:
        logger.debug("Unrecognized line: %r", cleaned)
        return Unrecognized(line=line)

    try:
        return match.rule.extract(match.fields, match.dialect)
    except FieldConversionError as exc:
        field_name, text = exc.field_name, exc.text
    except ValidationError as exc:
        loc = exc.errors()[0]["loc"]
        field_name = str(loc[0]) if loc else ""
        text = match.fields.get(field_name) or ""

    logger.info(
        "Malformed %s field %s=%r (rule %s)",
        match.category.value,
        field_name,
        text,
        match.rule.name,
    )
    return MalformedField(
        category=match.category,
        dialect=match.dialect,
        field_name=field_name,
        text=text,
        line=line,
    )


def spot_key(spot: Spot) -> str:
    """Stable hash for duplicate suppression; ignores the relaying dialect."""
    key = spot.model_dump(mode="json", include=_KEY_FIELDS)
    return hashlib.sha256(json.dumps(key, sort_keys=True, default=str).encode("utf-8")).hexdigest()


def resolve_timestamp(spot_time: dt.time, reference: dt.datetime) -> dt.datetime:
    """
    Anchor a spot's time of day to the UTC date of ``reference``.
    A result later than ``reference`` belongs to the previous day.
    """
    if reference.tzinfo is None:
        raise ValueError("reference must be timezone-aware")
    ref = reference.astimezone(dt.timezone.utc)
    stamp = ref.replace(hour=spot_time.hour, minute=spot_time.minute, second=0, microsecond=0)
    if stamp > ref:
        stamp -= relativedelta(days=1)
    return stamp
