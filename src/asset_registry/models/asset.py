"""Asset model definition and its ledger wire format."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from ..exceptions import SerializationError

AssetAttribute = str | int | float | bool
"""Opaque attribute value; the registry enforces no semantics beyond being a scalar."""


class Asset(BaseModel):
    """A uniquely keyed registry record.

    The ``id`` doubles as the ledger storage key and never changes once the
    asset is created, so the model is frozen and mutations build a
    replacement instance.

    On the ledger an asset is a flat JSON object keyed by ``ID``, ``Color``,
    ``Size``, ``Owner`` and ``AppraisedValue``. Keys are sorted so equal
    assets always encode to identical bytes.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(..., alias="ID", description="Unique asset identifier and ledger key")
    color: AssetAttribute = Field("", alias="Color", description="Asset color")
    size: AssetAttribute = Field(0, alias="Size", description="Asset size")
    owner: AssetAttribute = Field("", alias="Owner", description="Current owner")
    appraised_value: AssetAttribute = Field(0, alias="AppraisedValue", description="Appraised value")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation, keyed by field name."""
        return self.model_dump(by_alias=True, mode="json")

    def to_bytes(self) -> bytes:
        """Encode the asset for storage on the ledger.

        Raises:
            SerializationError: If the asset cannot be encoded.
        """
        try:
            return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(f"failed to encode asset {self.id}: {e}", key=self.id) from e

    @classmethod
    def build(
        cls,
        asset_id: str,
        color: AssetAttribute = "",
        size: AssetAttribute = 0,
        owner: AssetAttribute = "",
        appraised_value: AssetAttribute = 0,
    ) -> "Asset":
        """Build an asset from caller-supplied attributes.

        Raises:
            SerializationError: If an attribute is not a scalar the wire format can carry.
        """
        try:
            return cls(id=asset_id, color=color, size=size, owner=owner, appraised_value=appraised_value)
        except ValidationError as e:
            raise SerializationError(f"invalid attributes for asset {asset_id}: {e}", key=asset_id) from e

    @classmethod
    def from_bytes(cls, data: bytes, *, key: str | None = None) -> "Asset":
        """Decode an asset from the bytes stored on the ledger.

        Args:
            data: Raw ledger value
            key: Ledger key the value was read from, used in error messages

        Raises:
            SerializationError: If the bytes are not a valid asset record.
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            where = f" stored at {key}" if key is not None else ""
            raise SerializationError(f"failed to decode asset{where}: {e}", key=key) from e

    def with_owner(self, owner: AssetAttribute) -> "Asset":
        """Return a copy of the asset assigned to a new owner.

        Raises:
            SerializationError: If the owner is not a scalar attribute.
        """
        return self.build(self.id, self.color, self.size, owner, self.appraised_value)

    def __str__(self) -> str:
        return f"Asset({self.id} owner={self.owner} color={self.color} size={self.size} value={self.appraised_value})"
