"""Unit tests for the Asset model and its wire format."""

import json

import pytest
from pydantic import ValidationError

from asset_registry.exceptions import SerializationError
from asset_registry.models import Asset


@pytest.mark.unit
class TestAssetModel:
    """Test cases for Asset construction."""

    def test_defaults_match_zero_values(self) -> None:
        asset = Asset(id="asset1")

        assert asset.color == ""
        assert asset.size == 0
        assert asset.owner == ""
        assert asset.appraised_value == 0

    def test_populate_by_wire_name(self) -> None:
        asset = Asset.model_validate({"ID": "asset1", "Color": "blue", "Size": 5, "Owner": "Tomoko"})

        assert asset == Asset(id="asset1", color="blue", size=5, owner="Tomoko")

    def test_id_cannot_change(self, sample_asset: Asset) -> None:
        with pytest.raises(ValidationError):
            sample_asset.id = "asset2"  # type: ignore[misc]

    def test_attribute_types_are_preserved(self) -> None:
        asset = Asset(id="a", color=True, size=2.5, owner="7", appraised_value=7)

        assert asset.color is True
        assert asset.size == 2.5
        assert asset.owner == "7"
        assert isinstance(asset.appraised_value, int)

    def test_with_owner_keeps_id_and_other_attributes(self, sample_asset: Asset) -> None:
        moved = sample_asset.with_owner("Brad")

        assert moved.id == sample_asset.id
        assert moved.owner == "Brad"
        assert moved.color == sample_asset.color
        assert sample_asset.owner == "Tomoko"

    @pytest.mark.parametrize("owner", [None, ["Brad"], {"name": "Brad"}])
    def test_with_owner_rejects_non_scalar(self, sample_asset: Asset, owner: object) -> None:
        with pytest.raises(SerializationError) as exc_info:
            sample_asset.with_owner(owner)  # type: ignore[arg-type]

        assert exc_info.value.key == "asset1"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_str(self, sample_asset: Asset) -> None:
        assert str(sample_asset) == "Asset(asset1 owner=Tomoko color=blue size=5 value=300)"


@pytest.mark.unit
class TestAssetSerialization:
    """Test cases for encoding and decoding ledger bytes."""

    def test_encoding_is_flat_and_sorted(self, sample_asset: Asset) -> None:
        assert sample_asset.to_bytes() == (
            b'{"AppraisedValue":300,"Color":"blue","ID":"asset1","Owner":"Tomoko","Size":5}'
        )

    def test_decode_returns_equal_asset(self, sample_asset: Asset) -> None:
        assert Asset.from_bytes(sample_asset.to_bytes()) == sample_asset

    def test_decode_record_with_only_id(self) -> None:
        assert Asset.from_bytes(b'{"ID":"asset1"}') == Asset(id="asset1")

    def test_unknown_keys_are_ignored(self) -> None:
        data = json.dumps({"ID": "asset1", "docType": "asset"}).encode()

        assert Asset.from_bytes(data) == Asset(id="asset1")

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"not json",
            b"[1, 2]",
            b'{"Color": "blue"}',
            b'{"ID": "asset1", "Size": {"nested": true}}',
            b"\xff\xfe",
        ],
    )
    def test_invalid_records_raise_serialization_error(self, data: bytes) -> None:
        with pytest.raises(SerializationError):
            Asset.from_bytes(data)

    def test_decode_error_names_the_key(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            Asset.from_bytes(b"{", key="asset7")

        assert "asset7" in str(exc_info.value)
        assert exc_info.value.key == "asset7"
        assert exc_info.value.details["key"] == "asset7"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_to_dict_uses_wire_names(self, sample_asset: Asset) -> None:
        assert sample_asset.to_dict() == {
            "ID": "asset1",
            "Color": "blue",
            "Size": 5,
            "Owner": "Tomoko",
            "AppraisedValue": 300,
        }

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_floats_cannot_be_encoded(self, value: float) -> None:
        asset = Asset(id="asset1", size=value)

        with pytest.raises(SerializationError) as exc_info:
            asset.to_bytes()

        assert exc_info.value.key == "asset1"


@pytest.mark.unit
class TestAssetBuild:
    """Test cases for building assets from caller-supplied attributes."""

    def test_build_matches_constructor(self) -> None:
        assert Asset.build("asset1", "blue", 5, "Tomoko", 300) == Asset(
            id="asset1", color="blue", size=5, owner="Tomoko", appraised_value=300
        )

    def test_build_defaults(self) -> None:
        assert Asset.build("asset1") == Asset(id="asset1")

    @pytest.mark.parametrize(
        "attributes",
        [
            {"color": ["x"]},
            {"size": None},
            {"owner": {"name": "Tomoko"}},
            {"appraised_value": object()},
        ],
    )
    def test_non_scalar_attributes_raise_serialization_error(self, attributes: dict[str, object]) -> None:
        with pytest.raises(SerializationError) as exc_info:
            Asset.build("asset1", **attributes)  # type: ignore[arg-type]

        assert "asset1" in str(exc_info.value)
        assert exc_info.value.key == "asset1"
        assert isinstance(exc_info.value.__cause__, ValidationError)
