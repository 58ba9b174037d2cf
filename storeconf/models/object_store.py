"""Object store settings (OpenStack Swift and S3)"""

from enum import Enum
from typing import Dict, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, SecretStr, StrictBool, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError


class ObjectStoreBackend(str, Enum):
    SWIFT = "swift"
    S3 = "s3"


# Implementation classes the host application names in its `class` key
BACKEND_CLASSES: Dict[str, ObjectStoreBackend] = {
    "OC\\Files\\ObjectStore\\Swift": ObjectStoreBackend.SWIFT,
    "OC\\Files\\ObjectStore\\S3": ObjectStoreBackend.S3,
}

BACKEND_IDS = frozenset(backend.value for backend in ObjectStoreBackend)

_FROZEN = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class DomainRef(BaseModel):
    model_config = _FROZEN

    name: StrictStr = Field(..., min_length=1)


class SwiftCredentials(BaseModel):
    """Keystone user the Swift connection authenticates as"""

    model_config = _FROZEN

    name: StrictStr = Field(..., min_length=1)
    password: SecretStr
    domain: DomainRef


class SwiftProject(BaseModel):
    model_config = _FROZEN

    name: StrictStr = Field(..., min_length=1)
    domain: DomainRef


class SwiftScope(BaseModel):
    model_config = _FROZEN

    project: SwiftProject


class ObjectStoreSettings(BaseModel):
    """Swift object store reached through Keystone v3 authentication.

    Field names follow the keys of the host application's ``arguments``
    mapping (``tenantName``, ``serviceName``), exposed in snake case.
    """

    model_config = _FROZEN

    backend: Literal["swift"]
    bucket: StrictStr = Field(..., min_length=1)
    autocreate: StrictBool = False
    user: SwiftCredentials
    scope: SwiftScope
    tenant_name: Optional[StrictStr] = Field(None, alias="tenantName")
    region: StrictStr = "regionOne"
    url: StrictStr = Field(..., description="Keystone authentication URL")
    service_name: StrictStr = Field("swift", alias="serviceName")

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        parsed = urlparse(value)
        try:
            parsed.port
        except ValueError:
            raise PydanticCustomError("url_invalid", "'{url}' has an invalid port", {"url": value})
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise PydanticCustomError("url_invalid", "'{url}' is not a valid http(s) URL", {"url": value})
        return value

    @property
    def backend_id(self) -> ObjectStoreBackend:
        return ObjectStoreBackend(self.backend)


class S3ObjectStoreSettings(BaseModel):
    """S3 compatible object store (AWS, MinIO)"""

    model_config = _FROZEN

    backend: Literal["s3"]
    bucket: StrictStr = Field(..., min_length=1)
    autocreate: StrictBool = False
    key: StrictStr = Field(..., min_length=1)
    secret: SecretStr
    hostname: Optional[StrictStr] = None
    port: Optional[StrictInt] = Field(None, ge=1, le=65535)
    use_ssl: StrictBool = True
    use_path_style: StrictBool = False
    region: Optional[StrictStr] = None

    @property
    def backend_id(self) -> ObjectStoreBackend:
        return ObjectStoreBackend(self.backend)
