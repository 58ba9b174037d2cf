"""Cache (Redis) connection settings"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, StrictBool, StrictInt, StrictStr, field_validator, model_validator
from pydantic_core import PydanticCustomError

SECURE_SCHEMES = frozenset({"tls", "ssl", "rediss"})


class TlsSettings(BaseModel):
    """Client-side TLS options, keyed like a PHP stream ``ssl_context``"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    local_cert: Optional[StrictStr] = Field(None, description="Client certificate path")
    local_pk: Optional[StrictStr] = Field(None, description="Client private key path")
    cafile: Optional[StrictStr] = Field(None, description="CA certificate path")
    verify_peer_name: StrictBool = Field(True, description="Check the server name against its certificate")


class CacheConnectionSettings(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    host: StrictStr = Field(..., min_length=1, description="Host, optionally prefixed with a scheme such as tls://")
    port: StrictInt = Field(..., ge=1, le=65535)
    tls: Optional[TlsSettings] = Field(None, alias="ssl_context")
    password: Optional[SecretStr] = None
    user: Optional[StrictStr] = None
    db_index: StrictInt = Field(0, ge=0, alias="dbindex")
    timeout: Optional[float] = Field(None, ge=0)
    read_timeout: Optional[float] = Field(None, ge=0)

    @field_validator("timeout", "read_timeout", mode="before")
    @classmethod
    def _strict_number(cls, value: Any) -> Any:
        # Numbers only, no numeric strings or bools
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise PydanticCustomError("float_type", "Input should be a valid number")
        return value

    @model_validator(mode="after")
    def _check_host(self) -> "CacheConnectionSettings":
        if not self.hostname:
            raise PydanticCustomError(
                "string_too_short",
                "'{host}' names no host after its scheme",
                {"host": self.host, "field": "host", "min_length": 1},
            )
        if self.tls is not None and not self.uses_tls:
            raise PydanticCustomError(
                "insecure_transport",
                "TLS options require a secure host scheme, got '{host}'",
                {"host": self.host, "field": "host"},
            )
        return self

    @property
    def scheme(self) -> Optional[str]:
        """Transport scheme encoded in ``host``, lowercased"""
        if "://" not in self.host:
            return None
        return self.host.split("://", 1)[0].lower()

    @property
    def hostname(self) -> str:
        """Host without its scheme prefix"""
        if "://" not in self.host:
            return self.host
        return self.host.split("://", 1)[1]

    @property
    def uses_tls(self) -> bool:
        return self.scheme in SECURE_SCHEMES
