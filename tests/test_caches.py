"""Segregated cache roles and their key-value backends."""

from __future__ import annotations

import json

import pytest

from adapters.caches import (
    ACCESS_TOKEN_KEY,
    USER_ID_KEY,
    AccessTokenCache,
    FatAccessTokenCache,
    FatUserCache,
    UserIdCache,
)
from adapters.stores import JsonFileValueStore, MemoryValueStore
from core.domain.models import Token
from core.errors import DecodeFailure
from core.interfaces.storage import AccessTokenCacheable, UserIdCacheable, ValueSaver, ValueStore


class TestRoleSurfaces:
    def test_user_id_cache_has_no_token_read(self):
        cache = UserIdCache(MemoryValueStore())
        assert not hasattr(cache, "retrieve_access_token")
        assert isinstance(cache, UserIdCacheable)
        assert not isinstance(cache, AccessTokenCacheable)

    def test_token_cache_has_no_user_id_read(self):
        cache = AccessTokenCache(MemoryValueStore())
        assert not hasattr(cache, "retrieve_user_id")
        assert isinstance(cache, AccessTokenCacheable)
        assert not isinstance(cache, UserIdCacheable)

    def test_both_are_value_savers(self):
        assert isinstance(UserIdCache(MemoryValueStore()), ValueSaver)
        assert isinstance(AccessTokenCache(MemoryValueStore()), ValueSaver)

    def test_declared_role_without_its_read_fails_at_construction(self):
        class BrokenTokenCache(AccessTokenCacheable):
            def save(self, value: bytes) -> None:
                pass

        with pytest.raises(TypeError):
            BrokenTokenCache()

    def test_fat_contract_forces_stub_reads(self):
        store = MemoryValueStore()
        user_cache = FatUserCache(store)
        token_cache = FatAccessTokenCache(store)
        user_cache.save(b"u-1")
        token_cache.save(Token(access_token="abc").model_dump_json().encode())

        assert user_cache.retrieve_user_id() == "u-1"
        assert user_cache.retrieve_access_token() is None
        assert token_cache.retrieve_access_token() == Token(access_token="abc")
        assert token_cache.retrieve_user_id() is None


class TestUserIdCache:
    def test_absent_is_none(self):
        assert UserIdCache(MemoryValueStore()).retrieve_user_id() is None

    def test_save_and_retrieve(self):
        store = MemoryValueStore()
        cache = UserIdCache(store)
        cache.save(b"user-123")
        assert cache.retrieve_user_id() == "user-123"
        assert store.get(USER_ID_KEY) == b"user-123"

    def test_undecodable_value(self):
        store = MemoryValueStore()
        store.set(USER_ID_KEY, b"\xff\xfe")
        with pytest.raises(DecodeFailure):
            UserIdCache(store).retrieve_user_id()


class TestAccessTokenCache:
    def test_absent_is_none(self):
        assert AccessTokenCache(MemoryValueStore()).retrieve_access_token() is None

    def test_same_key_for_save_and_retrieve(self):
        store = MemoryValueStore()
        cache = AccessTokenCache(store)
        token = Token(access_token="secret", expires_in=3600)
        cache.save_token(token)

        assert store.get(ACCESS_TOKEN_KEY) is not None
        assert store.get(USER_ID_KEY) is None
        assert cache.retrieve_access_token() == token

    def test_undecodable_token(self):
        store = MemoryValueStore()
        cache = AccessTokenCache(store)
        cache.save(b"not-json")
        with pytest.raises(DecodeFailure):
            cache.retrieve_access_token()

    def test_backends_are_isolated(self):
        secure, simple = MemoryValueStore(), MemoryValueStore()
        AccessTokenCache(secure).save_token(Token(access_token="t"))
        UserIdCache(simple).save(b"u")

        assert UserIdCache(secure).retrieve_user_id() is None
        assert AccessTokenCache(simple).retrieve_access_token() is None


class TestJsonFileValueStore:
    def test_satisfies_contract(self, tmp_path):
        assert isinstance(JsonFileValueStore(tmp_path / "d.json"), ValueStore)

    def test_missing_file_is_none(self, tmp_path):
        assert JsonFileValueStore(tmp_path / "missing.json").get("UserId") is None

    def test_round_trip_survives_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "defaults.json"
        JsonFileValueStore(path).set("UserId", b"abc")

        assert JsonFileValueStore(path).get("UserId") == b"abc"
        assert json.loads(path.read_text(encoding="utf-8")) == {"UserId": "YWJj"}

    def test_keeps_other_keys(self, tmp_path):
        store = JsonFileValueStore(tmp_path / "d.json")
        store.set("a", b"1")
        store.set("b", b"2")
        assert store.get("a") == b"1"
        assert store.get("b") == b"2"

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "d.json"
        path.write_text("{nope", encoding="utf-8")
        with pytest.raises(DecodeFailure):
            JsonFileValueStore(path).get("UserId")

    def test_non_base64_value(self, tmp_path):
        path = tmp_path / "d.json"
        path.write_text('{"UserId": "***"}', encoding="utf-8")
        with pytest.raises(DecodeFailure):
            JsonFileValueStore(path).get("UserId")

    def test_user_id_cache_over_file(self, tmp_path):
        cache = UserIdCache(JsonFileValueStore(tmp_path / "d.json"))
        cache.save("josé".encode("utf-8"))
        assert cache.retrieve_user_id() == "josé"
