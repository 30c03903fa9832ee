"""Encryption of tokens stored in credential store."""

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESSIV
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

import constants
from store.store_error import TokenDecryptionError

# AES-SIV with 512 bit key (two AES-256 keys)
KEY_LENGTH = 64


class TokenCipher:
    """Deterministic symmetric encryption of tokens.

    AES-SIV without nonce is used, so equal plaintexts are encrypted into equal
    ciphertexts. Credential store relies on it when it searches for a token
    presented by client. The key used by AES-SIV is derived from the configured
    encryption key by HKDF.
    """

    def __init__(self, encryption_key: str) -> None:
        """Derive the encryption key from configured secret value."""
        if not encryption_key:
            raise ValueError("Encryption key is not set")
        kdf = HKDF(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH,
            salt=None,
            info=constants.TOKEN_CIPHER_KDF_INFO,
        )
        self._aead = AESSIV(kdf.derive(encryption_key.encode("utf-8")))

    def encrypt(self, token: str) -> bytes:
        """Encrypt token."""
        if not token:
            raise ValueError("Empty token can not be encrypted")
        return self._aead.encrypt(token.encode("utf-8"), None)

    def decrypt(self, ciphertext: bytes) -> str:
        """Decrypt token, memoryview returned by PostgreSQL driver is accepted too."""
        try:
            return self._aead.decrypt(bytes(ciphertext), None).decode("utf-8")
        except (InvalidTag, ValueError) as e:
            raise TokenDecryptionError(
                "Stored token can not be decrypted by configured key"
            ) from e
