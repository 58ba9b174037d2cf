"""Resolved runtime settings"""

from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

from storeconf.core.errors import MissingField
from storeconf.models.cache import CacheConnectionSettings
from storeconf.models.object_store import BACKEND_CLASSES, ObjectStoreSettings, S3ObjectStoreSettings

AnyObjectStoreSettings = Annotated[
    Union[ObjectStoreSettings, S3ObjectStoreSettings],
    Field(discriminator="backend"),
]


def normalize_object_store_section(section: Any, name: str = "objectstore") -> Any:
    """Flatten the ``class`` + ``arguments`` form into ``backend`` + fields.

    Anything that is not a mapping is returned untouched so validation can
    report it.
    """
    if not isinstance(section, dict):
        return section

    arguments = section.get("arguments")
    if arguments is not None and not isinstance(arguments, dict):
        raise PydanticCustomError(
            "section_type",
            "'{field}' must be a mapping",
            {"field": f"{name}.arguments"},
        )

    flat = {k: v for k, v in section.items() if k not in ("class", "arguments")}
    for key, value in (arguments or {}).items():
        flat.setdefault(key, value)

    if "backend" not in flat and "class" in section:
        class_name = section["class"]
        backend = BACKEND_CLASSES.get(class_name) if isinstance(class_name, str) else None
        flat["backend"] = backend.value if backend is not None else class_name
    return flat


class Settings(BaseModel):
    """Validated cache and object store settings.

    Either section may be absent when a fragment only configures one of them;
    consumers go through ``require_cache`` / ``require_object_store``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    cache: Optional[CacheConnectionSettings] = Field(None, alias="redis")
    object_store: Optional[AnyObjectStoreSettings] = Field(None, alias="objectstore")

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for key in ("objectstore", "object_store"):
            if key in data:
                data = {**data, key: normalize_object_store_section(data[key], key)}
        return data

    def require_cache(self) -> CacheConnectionSettings:
        if self.cache is None:
            raise MissingField("redis", "no cache connection ('redis') is configured")
        return self.cache

    def require_object_store(self) -> Union[ObjectStoreSettings, S3ObjectStoreSettings]:
        if self.object_store is None:
            raise MissingField("objectstore", "no object store ('objectstore') is configured")
        return self.object_store

    @property
    def sections(self) -> List[str]:
        present = []
        if self.cache is not None:
            present.append("redis")
        if self.object_store is not None:
            present.append("objectstore")
        return present

    def redacted(self) -> dict:
        """JSON-safe dump with secrets masked, keyed like the source"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
