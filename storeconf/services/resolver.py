"""Configuration Resolution

Reads configuration fragments, merges them and validates the result into an
immutable ``Settings`` object. Validation failures surface as typed
``ConfigError`` subclasses naming the offending key.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, Union

from pydantic import ValidationError

from storeconf.core.errors import (
    ConfigError,
    InsecureTransport,
    InvalidRange,
    InvalidType,
    MissingField,
    UnknownBackend,
)
from storeconf.models.object_store import BACKEND_IDS
from storeconf.models.settings import Settings
from storeconf.utils.sources import Source, find_fragments, merge_sources, read_source

logger = logging.getLogger(__name__)

MISSING_ERRORS = {"missing", "union_tag_not_found"}
RANGE_ERRORS = {
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
    "string_too_short",
    "string_too_long",
}
BACKEND_ERRORS = {"union_tag_invalid", "literal_error"}
TRANSPORT_ERRORS = {"insecure_transport"}

OBJECT_STORE_SECTIONS = ("objectstore", "object_store")


def classify_error(error_type: str) -> Type[ConfigError]:
    """Map a pydantic error type onto the configuration error taxonomy"""
    if error_type in MISSING_ERRORS:
        return MissingField
    if error_type in RANGE_ERRORS:
        return InvalidRange
    if error_type in BACKEND_ERRORS:
        return UnknownBackend
    if error_type in TRANSPORT_ERRORS:
        return InsecureTransport
    return InvalidType


def error_location(error: Mapping[str, Any]) -> List[str]:
    loc = [str(part) for part in error.get("loc", ())]

    # Discriminated unions put the backend tag into the location
    if len(loc) > 1 and loc[0] in OBJECT_STORE_SECTIONS and loc[1] in BACKEND_IDS:
        del loc[1]

    field = (error.get("ctx") or {}).get("field")
    if field:
        loc.extend(str(field).split("."))

    if error["type"] in ("union_tag_invalid", "union_tag_not_found"):
        loc.append("backend")
    return loc


def translate_validation_error(exc: ValidationError) -> ConfigError:
    """Build the ConfigError for the first failure, keeping all of them as details"""
    errors = exc.errors(include_url=False, include_input=False)
    details: List[Dict[str, Any]] = []
    for error in errors:
        loc = error_location(error)
        details.append({
            "path": ".".join(loc) or "<root>",
            "type": error["type"],
            "message": error["msg"],
        })

    first = errors[0]
    loc = error_location(first)
    key = loc[-1] if loc else "<root>"
    path = ".".join(loc) or "<root>"
    error_cls = classify_error(first["type"])
    return error_cls(key, f"{path}: {first['msg']}", path=path, details=details)


def _describe(source: Any) -> str:
    if isinstance(source, (str, os.PathLike)):
        return str(source)
    return f"<{type(source).__name__}>"


class ConfigResolver:
    """Loads configuration sources into validated Settings"""

    def __init__(self, pattern: str = "*.config.*"):
        self.pattern = pattern

    def load(self, source: Source) -> Settings:
        """Load one path or mapping"""
        logger.debug(f"Loading configuration from {_describe(source)}")
        return self.validate(read_source(source))

    def load_all(self, sources: Iterable[Source]) -> Settings:
        """Merge several sources in order, later keys winning, then validate"""
        sources = list(sources)
        logger.debug(f"Merging {len(sources)} configuration sources: {', '.join(map(_describe, sources))}")
        return self.validate(merge_sources(sources))

    def load_directory(self, directory: Union[str, os.PathLike], pattern: Optional[str] = None) -> Settings:
        """Merge every fragment in ``directory`` matching ``pattern``, in lexical order"""
        fragments = find_fragments(directory, pattern or self.pattern)
        if not fragments:
            logger.warning(f"No configuration fragments matching '{pattern or self.pattern}' in {Path(directory)}")
        return self.load_all(fragments)

    def validate(self, data: Mapping[str, Any]) -> Settings:
        try:
            settings = Settings.model_validate(dict(data))
        except ValidationError as e:
            error = translate_validation_error(e)
            logger.warning(f"Configuration rejected ({type(error).__name__}): {error.message}")
            raise error from e

        logger.info(f"Configuration resolved: sections={settings.sections or 'none'}")
        return settings


_default_resolver = ConfigResolver()


def load(source: Source) -> Settings:
    return _default_resolver.load(source)


def load_all(sources: Iterable[Source]) -> Settings:
    return _default_resolver.load_all(sources)
