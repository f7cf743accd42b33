import logging
from enum import Enum
from pathlib import PurePath
from typing import Any, Iterable, List, Mapping, Optional

import yaml
from pydantic import TypeAdapter, ValidationError

from .exceptions import DeckLoadError
from .models import CardRecord, Deck, DeckLoadResult, LoadStatus
from .resources import ResourceProvider

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(List[CardRecord])

_UTF8_BOM = b"\xef\xbb\xbf"

# Card text is always a string; YAML 1.1 would read "No" or "Si" as booleans.
_PLAIN_STRING_TAGS = {"tag:yaml.org,2002:bool", "tag:yaml.org,2002:timestamp"}


class _DeckYAMLLoader(yaml.SafeLoader):
    yaml_implicit_resolvers = {
        first_char: [
            (tag, regexp)
            for tag, regexp in resolvers
            if tag not in _PLAIN_STRING_TAGS
        ]
        for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


class DeckFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_name(cls, name: str) -> "DeckFormat":
        """Pick the format from a resource name's suffix; JSON by default."""
        suffix = PurePath(name).suffix.lower()
        if suffix in (".yaml", ".yml"):
            return cls.YAML
        return cls.JSON


def _describe_validation_error(e: ValidationError) -> str:
    error_details = e.errors()[0]
    field = ".".join(map(str, error_details["loc"]))
    msg = error_details["msg"]
    if field:
        return f"Validation error in field '{field}': {msg}"
    return f"Validation error: {msg}"


def _parse_records(source: bytes, fmt: DeckFormat) -> List[CardRecord]:
    """
    Decode a deck document into its records.

    Raises:
        DeckLoadError: If the bytes are not valid UTF-8, not valid JSON/YAML,
            or do not match the list-of-records shape.
    """
    try:
        if fmt is DeckFormat.YAML:
            raw = yaml.load(source.decode("utf-8-sig"), Loader=_DeckYAMLLoader)
            return _RECORDS_ADAPTER.validate_python(raw)
        if source.startswith(_UTF8_BOM):
            source = source[len(_UTF8_BOM):]
        return _RECORDS_ADAPTER.validate_json(source)
    except UnicodeDecodeError as e:
        raise DeckLoadError(f"Deck is not valid UTF-8: {e}", e) from e
    except yaml.YAMLError as e:
        raise DeckLoadError(f"Invalid YAML syntax: {e}", e) from e
    except ValidationError as e:
        raise DeckLoadError(_describe_validation_error(e), e) from e
    except (ValueError, RecursionError) as e:
        raise DeckLoadError(f"Malformed deck document: {e}", e) from e


def build_deck(records: Iterable[CardRecord]) -> Deck:
    """Map records to cards, keeping record order and emoji order."""
    return tuple(record.to_card() for record in records)


def load_with_status(
    source: Optional[bytes],
    fmt: DeckFormat = DeckFormat.JSON,
    source_name: Optional[str] = None,
) -> DeckLoadResult:
    """
    Load a deck and report whether the load succeeded.

    Never raises. A failed load yields an empty deck with status FAILED and
    the reason in `error`, so callers can tell it apart from a well-formed
    document that simply holds no cards (status EMPTY).
    """
    if source is None:
        logger.warning(f"Deck source '{source_name or '<unnamed>'}' is absent.")
        return DeckLoadResult(
            status=LoadStatus.FAILED,
            source_name=source_name,
            error="Deck source is absent.",
        )

    try:
        records = _parse_records(source, fmt)
    except DeckLoadError as e:
        logger.warning(
            f"Failed to load deck '{source_name or '<unnamed>'}': {e}"
        )
        return DeckLoadResult(
            status=LoadStatus.FAILED, source_name=source_name, error=str(e)
        )

    deck = build_deck(records)
    logger.info(f"Loaded {len(deck)} cards from '{source_name or '<unnamed>'}'.")
    return DeckLoadResult(
        deck=deck,
        status=LoadStatus.LOADED if deck else LoadStatus.EMPTY,
        source_name=source_name,
    )


def load(source: Optional[bytes], fmt: DeckFormat = DeckFormat.JSON) -> Deck:
    """Load a deck, falling back to an empty deck on any failure."""
    return load_with_status(source, fmt).deck


def load_resource(provider: ResourceProvider, name: str) -> DeckLoadResult:
    """Fetch a named deck document from `provider` and load it."""
    logger.debug(f"Loading deck resource '{name}'")
    return load_with_status(
        provider.load_bytes(name),
        DeckFormat.from_name(name),
        source_name=name,
    )


def static_deck(records: Iterable[Mapping[str, Any]]) -> Deck:
    """
    Build a deck from in-memory record mappings.

    Compiled-in decks go through the same record validation as loaded ones.
    Unlike `load`, a malformed record raises a ValidationError here, since it
    is a programming error rather than bad input.
    """
    return build_deck(_RECORDS_ADAPTER.validate_python(list(records)))
