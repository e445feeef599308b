"""Tests for JSON storage helpers and path resolution."""

import json

import pytest

from assets_manager.core.exceptions import ReadFailureError, WriteFailureError
from assets_manager.core.models import AssetInfo, TokenList, TokenListEntry
from assets_manager.core.types import TokenListKind
from assets_manager.storage.json_store import prepare_json_data, read_json, write_json
from assets_manager.storage.paths import RegistryPaths, asset_logo_url


class TestRegistryPaths:
    """Tests for RegistryPaths."""

    def test_layout(self, tmp_path):
        paths = RegistryPaths(tmp_path)
        chain_dir = tmp_path / "blockchains" / "ethereum"

        assert paths.asset_info_path("ethereum", "0xT") == chain_dir / "assets" / "0xT" / "info.json"
        assert paths.asset_logo_path("ethereum", "0xT") == chain_dir / "assets" / "0xT" / "logo.png"
        assert paths.token_list_path("ethereum", TokenListKind.DEFAULT) == chain_dir / "tokenlist.json"
        assert (
            paths.token_list_path("ethereum", TokenListKind.EXTENDED)
            == chain_dir / "tokenlist-extended.json"
        )

    def test_list_kind_from_string(self, tmp_path):
        paths = RegistryPaths(tmp_path)

        assert paths.token_list_path("tron", "extended").name == "tokenlist-extended.json"

    def test_logo_url(self):
        expected = "https://assets-cdn.trustwallet.com/blockchains/ethereum/assets/0xT/logo.png"

        assert asset_logo_url("https://assets-cdn.trustwallet.com", "ethereum", "0xT") == expected
        assert asset_logo_url("https://assets-cdn.trustwallet.com/", "ethereum", "0xT") == expected
        assert RegistryPaths.asset_logo_url("https://a.b", "tron", "T1") == (
            "https://a.b/blockchains/tron/assets/T1/logo.png"
        )


class TestReadJson:
    """Tests for read_json."""

    def test_plain_read(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('{"a": [1, 2]}', encoding="utf-8")

        assert read_json(path) == {"a": [1, 2]}

    def test_model_read(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text('{"name": "L", "tokens": [], "version": {"major": 1}}', encoding="utf-8")

        token_list = read_json(path, TokenList)

        assert token_list.name == "L"
        assert token_list.version.major == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReadFailureError) as exc_info:
            read_json(tmp_path / "missing.json")

        assert "does not exist" in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[1, 2", encoding="utf-8")

        with pytest.raises(ReadFailureError):
            read_json(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text('{"tokens": "none"}', encoding="utf-8")

        with pytest.raises(ReadFailureError):
            read_json(path, TokenList)


class TestWriteJson:
    """Tests for write_json and formatting."""

    def test_formatting(self):
        text = prepare_json_data({"name": "Ünï", "tokens": []})

        assert text == '{\n    "name": "Ünï",\n    "tokens": []\n}\n'

    def test_model_uses_aliases_and_field_order(self):
        entry = TokenListEntry(asset="c60_t0xT", logo_uri="https://logo")

        data = json.loads(prepare_json_data(entry))

        assert list(data.keys()) == [
            "asset", "type", "address", "name", "symbol", "decimals", "logoURI",
        ]

    def test_model_nulls_kept_by_default(self):
        entry = TokenListEntry.model_validate({"asset": "c60_t0xT", "type": None, "pairs": None})

        data = json.loads(prepare_json_data(entry))

        assert data["type"] is None
        assert data["pairs"] is None

    def test_exclude_none(self):
        info = AssetInfo(name="Foo")

        data = json.loads(prepare_json_data(info, exclude_none=True))

        assert data == {"name": "Foo"}

    def test_overwrites_whole_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('{"old": "content that is longer than the new one"}', encoding="utf-8")

        write_json(path, {"new": 1})

        assert json.loads(path.read_text(encoding="utf-8")) == {"new": 1}

    def test_missing_directory(self, tmp_path):
        with pytest.raises(WriteFailureError):
            write_json(tmp_path / "nope" / "data.json", {})

    def test_create_dirs(self, tmp_path):
        path = write_json(tmp_path / "a" / "b" / "data.json", {"x": 1}, create_dirs=True)

        assert path.exists()

    def test_unserializable(self, tmp_path):
        with pytest.raises(WriteFailureError):
            write_json(tmp_path / "data.json", {"x": object()})

        assert not (tmp_path / "data.json").exists()
