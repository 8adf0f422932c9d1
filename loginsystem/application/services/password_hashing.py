"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from loginsystem.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashes; the salt and method travel inside the hash string.

    ``check_password_hash`` compares digests with ``hmac.compare_digest``.
    A stored value that is not shaped ``method$salt$hash`` raises
    ``ValueError`` instead of reading as a password mismatch.
    """

    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password, method=self._method))

    def verify(self, password: str, hashed: str) -> bool:
        if hashed.count("$") < 2:
            raise ValueError("stored password hash is not in method$salt$hash form")
        return bool(check_password_hash(hashed, password))
