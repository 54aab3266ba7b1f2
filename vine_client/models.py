"""
Pydantic models for Vine API responses used by vine_client.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, field_validator


class Record(BaseModel):
    """Open mapping around one JSON object returned by the API.

    Every record carries ``success`` and ``error`` so callers can check the
    outcome of a read without catching exceptions.
    """

    success: bool = True
    error: bool = False

    model_config = ConfigDict(extra="allow")

    @field_validator("success", mode="before")
    @classmethod
    def coerce_success(cls, value: Any) -> bool:
        return value is not False

    @field_validator("error", mode="before")
    @classmethod
    def coerce_error(cls, value: Any) -> bool:
        return bool(value)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Record":
        return cls.model_validate(dict(payload))

    def to_dict(self) -> dict[str, Any]:
        """Return the fields carried by the response body."""

        data = {
            name: getattr(self, name)
            for name in ("success", "error")
            if name in self.model_fields_set
        }
        data.update(self.model_extra or {})
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def keys(self) -> Iterable[str]:
        return self.to_dict().keys()

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()


class RecordList(list):
    """Ordered records returned by list endpoints."""

    success = True
    error = False

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__(
            Record.from_api(item) if isinstance(item, Mapping) else item for item in items
        )

    def records(self) -> Iterator[Record]:
        return (item for item in self if isinstance(item, Record))


class AuthenticationData(BaseModel):
    key: str | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("key", mode="before")
    @classmethod
    def coerce_key(cls, value: Any) -> str | None:
        return None if value is None else str(value)


class AuthenticationResponse(BaseModel):
    """Fields consumed from the ``users/authenticate`` response."""

    success: bool = False
    code: str | int | None = None
    error: str | None = None
    data: AuthenticationData | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("success", mode="before")
    @classmethod
    def coerce_success(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("error", mode="before")
    @classmethod
    def coerce_error(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("data", mode="before")
    @classmethod
    def drop_non_mapping_data(cls, value: Any) -> Any:
        return value if isinstance(value, Mapping) else None

    @classmethod
    def from_api(cls, payload: Any) -> "AuthenticationResponse":
        if not isinstance(payload, Mapping):
            return cls()
        return cls.model_validate(dict(payload))

    @property
    def key(self) -> str | None:
        return self.data.key if self.data else None


def failure(message: str | None = None, **fields: Any) -> Record:
    """Build the failure envelope returned by read operations."""

    payload: dict[str, Any] = {**fields, "success": False, "error": True}
    if message is not None:
        payload["message"] = message
    return Record.from_api(payload)
