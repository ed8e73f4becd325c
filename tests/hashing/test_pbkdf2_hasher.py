# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc,too-many-public-methods

"""Tests for the PBKDF2 hashers."""

import base64
import re
from typing import Callable

import pytest

from tests.constants import (
    GOLDEN_PBKDF2_SHA1,
    GOLDEN_PBKDF2_SHA256,
    PW_PBKDF2_SHA1,
    PW_PBKDF2_SHA256,
    TEST_ITERATIONS,
)
from unchained import (
    encode_pbkdf2_sha1,
    encode_pbkdf2_sha256,
    verify_pbkdf2_sha1,
    verify_pbkdf2_sha256,
)
from unchained.algorithms import Algorithm
from unchained.errors import MalformedHashError
from unchained.hashing import (
    PBKDF2Hasher,
    pbkdf2_sha1_hasher,
    pbkdf2_sha256_hasher,
)
from unchained.hashing._pbkdf2_hasher import get_random_string, mask_hash


@pytest.fixture(name="hasher", params=["sha256", "sha1"])
def hasher_fixture(request: pytest.FixtureRequest) -> PBKDF2Hasher:
    """Both PBKDF2 hashers with a low iteration count."""
    factories: dict[str, Callable[..., PBKDF2Hasher]] = {
        "sha256": pbkdf2_sha256_hasher,
        "sha1": pbkdf2_sha1_hasher,
    }
    return factories[request.param](iterations=TEST_ITERATIONS)


class TestGoldenFixtures:
    """Test the output matches what Django produces."""

    @pytest.mark.parametrize(
        "password,salt,iterations,expected", GOLDEN_PBKDF2_SHA256
    )
    def test_encode_pbkdf2_sha256(
        self, password: str, salt: str, iterations: int, expected: str
    ) -> None:
        """Test PBKDF2-SHA256 encoding."""
        assert encode_pbkdf2_sha256(password, salt, iterations) == expected
        assert verify_pbkdf2_sha256(password, expected)

    @pytest.mark.parametrize(
        "password,salt,iterations,expected", GOLDEN_PBKDF2_SHA1
    )
    def test_encode_pbkdf2_sha1(
        self, password: str, salt: str, iterations: int, expected: str
    ) -> None:
        """Test PBKDF2-SHA1 encoding."""
        assert encode_pbkdf2_sha1(password, salt, iterations) == expected
        assert verify_pbkdf2_sha1(password, expected)

    def test_algorithms_do_not_cross(self) -> None:
        """Test each verifier only accepts its own tag."""
        assert not verify_pbkdf2_sha1("pw", PW_PBKDF2_SHA256)
        assert not verify_pbkdf2_sha256("pw", PW_PBKDF2_SHA1)


class TestPBKDF2Hasher:
    """Test the shared PBKDF2 implementation."""

    def test_encode_format(self, hasher: PBKDF2Hasher) -> None:
        """Test the four field layout."""
        encoded = hasher.encode("password", "seasalt")

        algorithm, iterations, salt, digest = encoded.split("$")
        assert algorithm == hasher.algorithm.value
        assert iterations == str(TEST_ITERATIONS)
        assert salt == "seasalt"
        assert len(base64.b64decode(digest)) == hasher.digest_size

    def test_digest_sizes(self) -> None:
        """Test the derived key is as long as the digest."""
        assert pbkdf2_sha256_hasher().digest_size == 32
        assert pbkdf2_sha1_hasher().digest_size == 20

    def test_encode_is_deterministic(self, hasher: PBKDF2Hasher) -> None:
        """Test the same input always gives the same output."""
        first = hasher.encode("password", "seasalt", 10)
        second = hasher.encode("password", "seasalt", 10)
        assert first == second

    def test_encode_explicit_iterations(self, hasher: PBKDF2Hasher) -> None:
        """Test an explicit iteration count overrides the default."""
        encoded = hasher.encode("password", "seasalt", 7)
        assert encoded.split("$")[1] == "7"

    def test_verify_correct_password(self, hasher: PBKDF2Hasher) -> None:
        """Test a password verifies against its own hash."""
        encoded = hasher.encode("test_password_123", "seasalt")

        assert hasher.verify("test_password_123", encoded)

    def test_verify_incorrect_password(self, hasher: PBKDF2Hasher) -> None:
        """Test another password does not verify."""
        encoded = hasher.encode("test_password_123", "seasalt")

        assert not hasher.verify("wrong_password", encoded)
        assert not hasher.verify("test_password_12", encoded)
        assert not hasher.verify("", encoded)

    @pytest.mark.parametrize(
        "password",
        [
            "",
            "a" * 1000,
            "🔐密码test🔐",
            "p@ssw0rd!#$%^&*()",
            "  password with spaces  ",
        ],
    )
    def test_round_trip(self, hasher: PBKDF2Hasher, password: str) -> None:
        """Test various passwords verify against their own hash."""
        encoded = hasher.encode(password, hasher.salt())

        assert hasher.verify(password, encoded)
        assert not hasher.verify(password + "x", encoded)

    def test_case_sensitivity(self, hasher: PBKDF2Hasher) -> None:
        """Test verification is case-sensitive."""
        encoded = hasher.encode("TestPassword", "seasalt")

        assert not hasher.verify("testpassword", encoded)
        assert not hasher.verify("TESTPASSWORD", encoded)

    def test_tampered_digest(self, hasher: PBKDF2Hasher) -> None:
        """Test changing any digest character breaks verification."""
        encoded = hasher.encode("password", "seasalt")
        head, digest = encoded.rsplit("$", 1)
        for index, char in enumerate(digest):
            replacement = "A" if char != "A" else "B"
            tampered = digest[:index] + replacement + digest[index + 1 :]
            assert not hasher.verify("password", f"{head}${tampered}")

    def test_tampered_salt_and_iterations(self, hasher: PBKDF2Hasher) -> None:
        """Test changing the salt or iteration count breaks verification."""
        encoded = hasher.encode("password", "seasalt")
        algorithm, iterations, _, digest = encoded.split("$")

        assert not hasher.verify(
            "password", f"{algorithm}${iterations}$seasalu${digest}"
        )
        assert not hasher.verify(
            "password", f"{algorithm}${int(iterations) + 1}$seasalt${digest}"
        )

    def test_leading_zero_iterations(self, hasher: PBKDF2Hasher) -> None:
        """Test a zero padded iteration count does not verify."""
        encoded = hasher.encode("password", "seasalt")
        algorithm, iterations, salt, digest = encoded.split("$")

        padded = f"{algorithm}$0{iterations}${salt}${digest}"
        assert not hasher.verify("password", padded)

    @pytest.mark.parametrize(
        "encoded",
        [
            "",
            "not_a_hash",
            "{algorithm}",
            "{algorithm}$1000",
            "{algorithm}$1000$salt",
            "{algorithm}$1000$salt$digest$extra",
            "{algorithm}$abc$salt$digest",
            "{algorithm}$-1000$salt$digest",
            "{algorithm}$+1000$salt$digest",
            "{algorithm}$0$salt$digest",
            "{algorithm}$100000000000000000000000000000$salt$digest",
            "{algorithm}$1$abc$\ud800",
            "{algorithm}$1$\ud800$digest",
            "bcrypt$$2b$12$somebcrypthash",
            "$argon2id$v=19$m=65536$hash",
        ],
    )
    def test_verify_malformed(self, hasher: PBKDF2Hasher, encoded: str) -> None:
        """Test malformed hashes fail closed without raising."""
        encoded = encoded.format(algorithm=hasher.algorithm.value)

        assert not hasher.verify("password", encoded)

    def test_verify_unencodable_password(self, hasher: PBKDF2Hasher) -> None:
        """Test a password that is not valid UTF-8 fails closed."""
        encoded = hasher.encode("password", "seasalt")

        assert not hasher.verify("\ud800", encoded)

    def test_encode_rejects_separator_in_salt(
        self, hasher: PBKDF2Hasher
    ) -> None:
        """Test a salt with the separator is refused."""
        with pytest.raises(ValueError):
            hasher.encode("password", "sea$salt")

    @pytest.mark.parametrize("iterations", [0, -1])
    def test_encode_rejects_non_positive_iterations(
        self, hasher: PBKDF2Hasher, iterations: int
    ) -> None:
        """Test the iteration count must be positive."""
        with pytest.raises(ValueError):
            hasher.encode("password", "seasalt", iterations)

    def test_salt_is_opaque(self, hasher: PBKDF2Hasher) -> None:
        """Test any salt without the separator is used as given."""
        for salt in ("", "a", " spaced salt ", "sälz", "=/+", "x" * 200):
            encoded = hasher.encode("password", salt)
            assert encoded.split("$")[2] == salt
            assert hasher.verify("password", encoded)


class TestSalt:
    """Test salt generation."""

    def test_default_salt(self, hasher: PBKDF2Hasher) -> None:
        """Test the default salt carries 128 bits of entropy."""
        salt = hasher.salt()

        assert len(salt) == 22
        assert re.fullmatch(r"[A-Za-z0-9]+", salt)

    def test_salt_uniqueness(self, hasher: PBKDF2Hasher) -> None:
        """Test two salts differ."""
        assert hasher.salt() != hasher.salt()

    def test_salt_entropy(self) -> None:
        """Test the salt length follows the entropy setting."""
        hasher = pbkdf2_sha256_hasher(salt_entropy=256)

        assert len(hasher.salt()) == 43

    def test_get_random_string(self) -> None:
        """Test the random string alphabet and length."""
        assert get_random_string(0) == ""
        assert len(get_random_string(12)) == 12
        assert set(get_random_string(50, "xyz")) <= {"x", "y", "z"}


class TestNeedsRehash:
    """Test detecting outdated hashes."""

    def test_up_to_date(self, hasher: PBKDF2Hasher) -> None:
        """Test a hash with the current parameters."""
        encoded = hasher.encode("password", hasher.salt())

        assert not hasher.needs_rehash(encoded)

    def test_other_iterations(self, hasher: PBKDF2Hasher) -> None:
        """Test a hash with another iteration count."""
        encoded = hasher.encode("password", hasher.salt(), TEST_ITERATIONS + 1)

        assert hasher.needs_rehash(encoded)

    def test_weak_salt(self, hasher: PBKDF2Hasher) -> None:
        """Test a hash with a short salt."""
        encoded = hasher.encode("password", "abc123")

        assert hasher.needs_rehash(encoded)

    def test_not_ours(self, hasher: PBKDF2Hasher) -> None:
        """Test hashes of other algorithms or malformed ones."""
        other = (
            pbkdf2_sha1_hasher()
            if hasher.algorithm is Algorithm.PBKDF2_SHA256
            else pbkdf2_sha256_hasher()
        )
        assert hasher.needs_rehash(other.encode("password", "seasalt", 1))
        assert hasher.needs_rehash("")
        assert hasher.needs_rehash(f"{hasher.algorithm.value}$x$salt$hash")


class TestSafeSummary:
    """Test describing a hash without its secrets."""

    def test_safe_summary(self) -> None:
        """Test the salt and the digest are masked."""
        summary = pbkdf2_sha256_hasher().safe_summary(PW_PBKDF2_SHA256)

        assert summary == {
            "algorithm": "pbkdf2_sha256",
            "iterations": "100000",
            "salt": "abc123",
            "hash": "7J/4m+" + "*" * 38,
        }

    def test_safe_summary_long_salt(self) -> None:
        """Test a salt longer than the shown prefix is masked."""
        hasher = pbkdf2_sha1_hasher(iterations=TEST_ITERATIONS)
        encoded = hasher.encode("password", "seasaltseasalt")

        assert hasher.safe_summary(encoded)["salt"] == "seasal********"

    def test_safe_summary_malformed(self, hasher: PBKDF2Hasher) -> None:
        """Test a hash that is not ours cannot be summarized."""
        with pytest.raises(MalformedHashError):
            hasher.safe_summary("bcrypt$$2b$12$hash")

    def test_mask_hash(self) -> None:
        """Test masking keeps the requested prefix."""
        assert mask_hash("abcdefgh") == "abcdef**"
        assert mask_hash("abcdefgh", show=2, char="#") == "ab######"
        assert mask_hash("abc") == "abc"
