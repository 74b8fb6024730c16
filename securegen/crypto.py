#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import warnings
from contextlib import nullcontext
from typing import Optional, Tuple

from cryptography.utils import CryptographyDeprecationWarning

with warnings.catch_warnings():
    warnings.simplefilter("ignore", CryptographyDeprecationWarning)
    import pgpy
    from pgpy.constants import (
        CompressionAlgorithm,
        HashAlgorithm,
        KeyFlags,
        PubKeyAlgorithm,
        SymmetricKeyAlgorithm,
    )
    from pgpy.errors import PGPDecryptionError, PGPError

from securegen.schema import DecryptResult, EncryptResult
from securegen.transport import escape_newlines, unpack

# PGPDecryptionError is not a PGPError subclass; malformed packets surface as built-ins
_PGP_FAILURES = (PGPError, PGPDecryptionError, ValueError, TypeError, KeyError, IndexError, NotImplementedError)


class CryptoError(RuntimeError):
    pass


def read_key(armored: str, private: bool = False) -> pgpy.PGPKey:
    """
    Разбирает ASCII-armored ключ.
    Для private=True требует закрытый ключ, иначе возвращает открытую часть.
    """
    kind = "private" if private else "public"
    try:
        key, _ = pgpy.PGPKey.from_blob(armored)
    except _PGP_FAILURES as e:
        raise CryptoError(f"Cannot parse {kind} key: {e}") from e

    if private:
        if key.is_public:
            raise CryptoError("Cannot parse private key: a public key was supplied")
        return key
    return key if key.is_public else key.pubkey


def _unlocked(key, passphrase: Optional[str]):
    if not key.is_protected:
        return nullcontext(key)
    if passphrase is None:
        raise CryptoError("Private key is passphrase-protected and no passphrase was given")
    return key.unlock(passphrase)


def encrypt_message(message: str, public_key_armored: str, logger=None) -> EncryptResult:
    """
    Шифрует текст открытым ключом получателя.
    Возвращает ASCII-armored сообщение с переводами строк \\n.
    """
    public_key = read_key(public_key_armored)

    try:
        encrypted = public_key.encrypt(pgpy.PGPMessage.new(message))
    except _PGP_FAILURES as e:
        if logger:
            logger.debug(f"Encryption rejected by PGPy: {e!r}")
        raise CryptoError(f"Encryption failed: {e}") from e

    armored = str(encrypted).replace("\r\n", "\n")
    if logger:
        logger.debug(f"Encrypted message: {escape_newlines(armored)}")
    return EncryptResult(encrypted=armored)


def decrypt_message(
    encrypted: str,
    private_key_armored: str,
    passphrase: Optional[str] = None,
    logger=None,
) -> DecryptResult:
    """
    Дешифрует сообщение закрытым ключом.
    Экранированные \\n, base64 и JSON-строка от encrypt допускаются на входе.
    """
    if logger:
        logger.debug(f"Raw encrypted message: {encrypted}")
    armored = unpack(encrypted)
    if logger:
        logger.debug(f"Fixed encrypted message: {escape_newlines(armored)}")

    private_key = read_key(private_key_armored, private=True)

    try:
        message = pgpy.PGPMessage.from_blob(armored)
    except _PGP_FAILURES as e:
        raise CryptoError(f"Cannot parse encrypted message: {e}") from e
    if not message.is_encrypted:
        raise CryptoError("Cannot decrypt: message is not encrypted")

    # a wrong passphrase surfaces when the unlock context is entered
    try:
        with _unlocked(private_key, passphrase) as key:
            decrypted = key.decrypt(message)
    except _PGP_FAILURES as e:
        raise CryptoError(f"Decryption failed: {e}") from e

    data = decrypted.message
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise CryptoError("Decrypted payload is not UTF-8 text") from e

    return DecryptResult(decrypted_data=data.rstrip())


def generate_keypair(
    name: str,
    email: str = "",
    key_size: int = 3072,
    passphrase: Optional[str] = None,
) -> Tuple[str, str]:
    """Генерирует RSA-пару ключей. Возвращает (public_armored, private_armored)."""
    key = pgpy.PGPKey.new(PubKeyAlgorithm.RSAEncryptOrSign, key_size)
    uid = pgpy.PGPUID.new(name, email=email)
    key.add_uid(
        uid,
        usage={KeyFlags.Sign, KeyFlags.EncryptCommunications, KeyFlags.EncryptStorage},
        hashes=[HashAlgorithm.SHA256, HashAlgorithm.SHA512],
        ciphers=[SymmetricKeyAlgorithm.AES256, SymmetricKeyAlgorithm.AES128],
        compression=[
            CompressionAlgorithm.ZLIB,
            CompressionAlgorithm.ZIP,
            CompressionAlgorithm.Uncompressed,
        ],
    )
    public_armored = str(key.pubkey)
    if passphrase:
        key.protect(passphrase, SymmetricKeyAlgorithm.AES256, HashAlgorithm.SHA256)
    return public_armored, str(key)
