# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the hash facade."""

from typing import Any, List
from unittest.mock import MagicMock

import pytest

from hashwrap import BlowfishHasher, Hash, InvalidWorkFactorError

# cspell: disable
FOO_HASH = "$2y$15$aa5c57dda7634fc90a92duQSfz3E1u39Z6s63i6l5QpvgJK5tSKri"
DATA_HASH = "$2y$15$aa5c57dda7634fc90a92duDv2OoNSn8R.p3.GSoaEZd6/vdiiq9lG"
FOO_HASH_WF5 = "$2y$05$aa5c57dda7634fc90a92duCIqZ6agXYH9mOnF/It6sfh3MAJAkKXe"
FOO_HASH_WF10 = "$2y$10$aa5c57dda7634fc90a92duoe.XRVTsrN1oW9P.qnaa.W0BGQ9olPy"
# cspell: enable


def _complex_data() -> List[Any]:
    return [object(), ["foo", "bar"], 12345]


class TestHashBlowfish:
    """Test the facade around a Blowfish hasher."""

    def test_string(self, hasher: Hash) -> None:
        """Test simple string hashing."""
        assert hasher.hash("foo") == FOO_HASH
        assert hasher.hash("bar") != FOO_HASH

    def test_serialized(self, hasher: Hash) -> None:
        """Test complex data hashing."""
        data = _complex_data()
        assert hasher.hash(data) == DATA_HASH

        data.append("foo")
        assert hasher.hash(data) != DATA_HASH

    def test_string_verify(self, hasher: Hash) -> None:
        """Test verification of string hashes."""
        assert hasher.verify("foo", FOO_HASH)
        assert not hasher.verify("bar", FOO_HASH)

    def test_object_verify(self, hasher: Hash) -> None:
        """Test verification of complex data hashes."""
        data = _complex_data()
        assert hasher.verify(data, DATA_HASH)

        data.append("foo")
        assert not hasher.verify(data, DATA_HASH)

    def test_work_factor_too_low(self, hasher: Hash) -> None:
        """Test invalid work factor."""
        with pytest.raises(InvalidWorkFactorError):
            hasher.get_hasher().set_work_factor(3)  # type: ignore

    def test_work_factor_too_high(self, hasher: Hash) -> None:
        """Test invalid work factor."""
        with pytest.raises(InvalidWorkFactorError):
            hasher.get_hasher().set_work_factor(32)  # type: ignore

    def test_work_factor(self, hasher: Hash) -> None:
        """Test work factor changes through the wrapped hasher."""
        hasher.get_hasher().set_work_factor(5)  # type: ignore
        assert hasher.hash("foo") == FOO_HASH_WF5

        hasher.get_hasher().set_work_factor(10)  # type: ignore
        assert hasher.hash("foo") == FOO_HASH_WF10

    def test_verify_uses_stored_work_factor(self, hasher: Hash) -> None:
        """Test verification does not depend on the current work factor."""
        hasher.get_hasher().set_work_factor(4)  # type: ignore
        assert hasher.verify("foo", FOO_HASH_WF5)
        assert not hasher.verify("bar", FOO_HASH_WF5)

    def test_salt_option_overrides_secret(self, hasher: Hash) -> None:
        """Test caller options win over the default salt."""
        hasher.get_hasher().set_work_factor(5)  # type: ignore
        assert (
            hasher.hash("foo", {"salt": "./A1aaaaaaaaaaaaaaaaaa"})
            # cspell: disable-next-line
            == "$2y$05$./A1aaaaaaaaaaaaaaaaaOZW9OJaO6Alj4.ZDbOi6Jrbn.bGZfYRK"
        )

    def test_without_secret_uses_random_salt(self) -> None:
        """Test a facade without a secret gets random salts."""
        facade = Hash(BlowfishHasher(4))
        hash1 = facade.hash({"user": "foo"})
        hash2 = facade.hash({"user": "foo"})
        assert hash1 != hash2
        assert facade.verify({"user": "foo"}, hash1)
        assert facade.verify({"user": "foo"}, hash2)
        assert not facade.verify({"user": "bar"}, hash1)

    def test_verify_malformed_hash(self, hasher: Hash) -> None:
        """Test malformed stored hashes do not match."""
        assert not hasher.verify("foo", "")
        # cspell: disable-next-line
        assert not hasher.verify("foo", "$2y$15$tooshort")


class TestHashFacade:
    """Test the facade with a stub hasher."""

    def test_hasher_is_shared(self) -> None:
        """Test that the facade keeps a reference, not a copy."""
        blowfish = BlowfishHasher(4)
        facade = Hash(blowfish, "secret")
        assert facade.get_hasher() is blowfish
        assert facade.hasher is blowfish
        blowfish.set_work_factor(5)
        assert facade.hash("foo").startswith("$2y$05$")

    def test_delegates_to_hasher(self) -> None:
        """Test hash and verify forward the serialized data and options."""
        stub = MagicMock()
        stub.hash.return_value = "hashed"
        stub.verify.return_value = True
        facade = Hash(stub, "secret")

        assert facade.hash(["a", 1]) == "hashed"
        stub.hash.assert_called_once_with(
            'a:2:{i:0;s:1:"a";i:1;i:1;}', {"salt": "secret"}
        )
        assert facade.verify("a", "stored", {"salt": "other", "extra": 1})
        stub.verify.assert_called_once_with(
            "a", "stored", {"salt": "other", "extra": 1}
        )

    def test_no_secret_no_salt_option(self) -> None:
        """Test that no salt option is added without a secret."""
        stub = MagicMock()
        facade = Hash(stub)
        facade.hash("a")
        stub.hash.assert_called_once_with("a", {})

    def test_pepper_is_appended(self) -> None:
        """Test the pepper is concatenated to the serialized data."""
        facade = Hash(MagicMock(), pepper="pepper")
        assert facade.serialize("foo") == "foopepper"
        assert facade.serialize(12345) == "12345pepper"
        assert facade.serialize(["foo"]) == 'a:1:{i:0;s:3:"foo";}pepper'

    def test_pepper_changes_hash(self) -> None:
        """Test that the pepper is part of the hashed string."""
        plain = Hash(BlowfishHasher(4), "secret")
        peppered = Hash(BlowfishHasher(4), "secret", pepper="pepper")
        assert plain.hash("foo") != peppered.hash("foo")
        assert peppered.verify("foo", peppered.hash("foo"))
        assert not plain.verify("foo", peppered.hash("foo"))

    def test_serialize_without_pepper(self) -> None:
        """Test scalars serialize to themselves without a pepper."""
        facade = Hash(MagicMock())
        assert facade.serialize("foo") == "foo"
        assert facade.serialize(True) == "1"
        assert facade.serialize(False) == ""
        assert facade.serialize(1.5) == "1.5"

    def test_serialize_is_stable(self) -> None:
        """Test the same data always serializes the same."""
        facade = Hash(MagicMock(), pepper="p")
        data = {"b": [1, 2.5, None], "a": {"nested": (True, "x")}}
        assert facade.serialize(data) == facade.serialize(
            {"b": [1, 2.5, None], "a": {"nested": (True, "x")}}
        )

    def test_repr_hides_secrets(self) -> None:
        """Test secrets are not part of the representation."""
        facade = Hash(BlowfishHasher(4), "top-secret", pepper="hot-pepper")
        assert "top-secret" not in repr(facade)
        assert "hot-pepper" not in repr(facade)
        assert "BlowfishHasher" in repr(facade)
