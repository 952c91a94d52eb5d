"""AES-256-CBC keys: derivation from a password, encryption and decryption."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import os
import secrets
from dataclasses import asdict, dataclass, field
from typing import Optional, Sequence

import yaml
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

ALGO = "aes-256-cbc"
DIGEST_SIZE = 32

TOMB_KEY = "~/.tomb.key"
"""The path used when no ``TOMB_KEY`` environment variable is set."""

KEY_CYCLES = 16000
SALT_CYCLES = 16000
IV_CYCLES = 16000

KEY_SIZE = 256
IV_SIZE = 16
_AES_KEY_LENGTH = 32
_BLOCK_BITS = 128


class AesError(Exception):
    """Raised when a key cannot be used, read or written."""


def default_key_filename() -> str:
    """Return the key path from ``TOMB_KEY``, or the builtin default."""
    filename = os.environ.get("TOMB_KEY")
    if filename is None:
        return TOMB_KEY
    return os.path.expanduser(filename)


def bytes_match(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without short-circuiting on the first difference."""
    diff = 0
    for x, y in zip(a, b):
        diff |= x ^ y
    return diff == 0 and len(a) == len(b)


def hmac_256_digest(mac_key: bytes, iv: bytes) -> bytes:
    """Return the HMAC-SHA256 of ``iv`` under ``mac_key``."""
    return hmac.new(bytes(mac_key), bytes(iv), hashlib.sha256).digest()[:DIGEST_SIZE]


def generate_key() -> bytes:
    """Return 256 random bytes of key material."""
    return secrets.token_bytes(KEY_SIZE)


def generate_iv() -> bytes:
    """Return a random 16-byte initialisation vector."""
    return secrets.token_bytes(IV_SIZE)


def _pbkdf2(password: str, salt: bytes, cycles: int, length: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes(salt), cycles, length)


@dataclass
class CyclesConfig:
    """Iteration counts for deriving the key, the salt and the iv."""

    key: int
    salt: int
    iv: int

    def to_list(self) -> list[int]:
        return [self.key, self.salt, self.iv]

    @classmethod
    def from_list(cls, values: Sequence[int]) -> "CyclesConfig":
        if len(values) != 3:
            raise ValueError(f"expected 3 cycle counts, got {len(values)}")
        key, salt, iv = values
        return cls(key=key, salt=salt, iv=iv)


@dataclass
class Config:
    """Key derivation settings."""

    cycles: CyclesConfig
    default_key_path: Optional[str] = None

    @classmethod
    def from_list(cls, values: Sequence[int]) -> "Config":
        return cls(cycles=CyclesConfig.from_list(values), default_key_path=None)

    @classmethod
    def builtin(cls, default_key_path: Optional[str] = None) -> "Config":
        return cls(
            cycles=CyclesConfig(key=KEY_CYCLES, salt=SALT_CYCLES, iv=IV_CYCLES),
            default_key_path=default_key_path,
        )

    @property
    def key_cycles(self) -> int:
        return self.cycles.key

    @property
    def salt_cycles(self) -> int:
        return self.cycles.salt

    @property
    def iv_cycles(self) -> int:
        return self.cycles.iv

    def derive_key(self, password: str, salt: bytes) -> bytes:
        return _pbkdf2(password, salt, self.key_cycles, KEY_SIZE)

    def derive_salt(self, password: str) -> bytes:
        return _pbkdf2(password, password.encode("utf-8"), self.salt_cycles, KEY_SIZE)

    def derive_iv(self, password: str) -> bytes:
        return _pbkdf2(password, password.encode("utf-8"), self.iv_cycles, IV_SIZE)


def _b64encode(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def _b64decode(value: str, what: str) -> bytes:
    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, ValueError, UnicodeEncodeError) as error:
        raise AesError(f"parse base64 {what}: {error}") from error


@dataclass
class Key:
    """AES-256 key data, stored as base64 strings."""

    algo: str
    key: str
    mac: str
    iv: str
    magic: Optional[list[int]] = field(default=None)

    @classmethod
    def from_password(cls, password: str, config: Config) -> "Key":
        """Derive a key from a password using the cycles of ``config``."""
        iv = config.derive_iv(password)
        salt = config.derive_salt(password)
        material = config.derive_key(password, salt)
        return cls(
            algo=ALGO,
            key=_b64encode(material[0:127]),
            mac=_b64encode(material[128:255]),
            iv=_b64encode(iv),
            magic=config.cycles.to_list(),
        )

    @classmethod
    def generate(cls) -> "Key":
        """Create a new random key."""
        iv = generate_iv()
        material = generate_key()
        return cls(
            algo=ALGO,
            key=_b64encode(material[0:127]),
            mac=_b64encode(material[128:255]),
            iv=_b64encode(iv),
            magic=None,
        )

    @classmethod
    def load(cls, filename: str) -> "Key":
        """Read a key from a YAML file."""
        try:
            with open(os.path.expanduser(filename), encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as error:
            raise AesError(f"cannot read key file {filename}: {error}") from error
        except yaml.YAMLError as error:
            raise AesError(f"cannot parse key file {filename}: {error}") from error
        if not isinstance(data, dict):
            raise AesError(f"invalid key file {filename}")
        try:
            magic = data.get("magic")
            return cls(
                algo=str(data["algo"]),
                key=str(data["key"]),
                mac=str(data["mac"]),
                iv=str(data["iv"]),
                magic=None if magic is None else [int(v) for v in magic],
            )
        except (KeyError, TypeError, ValueError) as error:
            raise AesError(f"invalid key file {filename}: {error}") from error

    def save(self, filename: str) -> None:
        """Write the key to a YAML file."""
        try:
            with open(os.path.expanduser(filename), "w", encoding="utf-8") as fh:
                yaml.safe_dump(asdict(self), fh, sort_keys=False)
        except OSError as error:
            raise AesError(f"cannot write key file {filename}: {error}") from error

    def owns_file(self, filename: str) -> bool:
        """Tell whether a file was encrypted with this key."""
        try:
            with open(filename, "rb") as fh:
                head = fh.read(DIGEST_SIZE)
        except OSError as error:
            raise AesError(
                f"reading the first {DIGEST_SIZE} bytes from file {filename}\n\t{error}"
            ) from error
        return self.check_digest(head.ljust(DIGEST_SIZE, b"\0"))

    def check_digest(self, buffer: bytes) -> bool:
        return bytes_match(buffer, self.digest())

    def digest(self) -> bytes:
        return hmac_256_digest(self.mac_bytes(), self.iv_bytes())

    def iv_bytes(self) -> bytes:
        return _b64decode(self.iv, "iv")

    def key_bytes(self) -> bytes:
        return _b64decode(self.key, "key")

    def mac_bytes(self) -> bytes:
        return _b64decode(self.mac, "mac")

    def _cipher(self) -> Cipher:
        # AES-256 takes the first 32 bytes of the stored key material.
        enc_key = self.key_bytes()[:_AES_KEY_LENGTH]
        if len(enc_key) != _AES_KEY_LENGTH:
            raise AesError(f"key is too short for {ALGO}")
        try:
            return Cipher(algorithms.AES(enc_key), modes.CBC(self.iv_bytes()))
        except ValueError as error:
            raise AesError(f"invalid key material: {error}") from error

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt with AES-256-CBC and PKCS#7 padding, prefixed by the key digest."""
        cipher = self._cipher()
        padder = padding.PKCS7(_BLOCK_BITS).padder()
        padded = padder.update(bytes(data)) + padder.finalize()
        encryptor = cipher.encryptor()
        body = encryptor.update(padded) + encryptor.finalize()
        return self.digest() + body

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Decrypt data produced by :meth:`encrypt` with this key."""
        cipher = self._cipher()
        ciphertext = bytes(ciphertext)
        if len(ciphertext) < DIGEST_SIZE:
            raise AesError("failed to convert digest to u8: data is too short")
        if not self.check_digest(ciphertext[:DIGEST_SIZE]):
            raise AesError(
                "Cannot decrypt: data was not encrypted with the provided key. "
                "Leaving file as is."
            )
        body = ciphertext[DIGEST_SIZE:]
        try:
            decryptor = cipher.decryptor()
            padded = decryptor.update(body) + decryptor.finalize()
            unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as error:
            raise AesError(f"cannot decrypt data: {error}") from error