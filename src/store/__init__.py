"""Credential store.

Credentials are bearer tokens assigned to accounts. Each account has at most
one credential and each credential has a monthly quota, i.e. the number of
requests that can be authorized in one billing period. Quota set to zero means
that the credential is not limited at all.

Tokens are never stored in plaintext. They are encrypted by deterministic
authenticated encryption (AES-SIV), so the same token encrypted by the same key
always leads to the same ciphertext. Thanks to this property it is possible to
find a credential by the token presented by client without decrypting the
whole table: the presented token is encrypted and compared with the stored
ciphertext.

Two storage backends are supported: SQLite (single connection guarded by a
lock) and PostgreSQL (thread-safe connection pool).
"""
