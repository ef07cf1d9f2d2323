# SIMPLEENC ENCRYPTION ENGINE ->

import asyncio
import os
import typing

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes


class SimpleEncError(Exception):
    """Base class for errors raised by the simpleenc engine."""


class MalformedEnvelopeError(SimpleEncError, ValueError):
    """Raised when an envelope is too short or its hex form cannot be parsed."""


class DecryptionError(SimpleEncError, ValueError):
    """Raised when the ciphertext fails to decrypt (wrong password or corruption)."""


BytesLike = typing.Union[bytes, bytearray, memoryview]


class simpleenc:
    ENGINE_VERSION = "1.0.0"
    ALGORITHM = "aes-256-cbc"
    IV_SIZE = 16
    KEY_SIZE = 32
    BLOCK_SIZE = 16
    _PADDING_BITS = BLOCK_SIZE * 8

    @staticmethod
    def _coerce_bytes(value: "typing.Union[str, BytesLike]", what: str = "data") -> bytes:
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(f"Unsupported {what} type: {type(value)!r}")

    @staticmethod
    def prepare_key(password: "typing.Union[str, BytesLike]") -> bytes:
        """Fit ``password`` to exactly ``KEY_SIZE`` bytes.

        Longer passwords are truncated and shorter ones are right-padded with
        zero bytes. This is not a key-derivation function: no hashing or
        stretching happens, so a short password gives a weak key.
        """
        raw = simpleenc._coerce_bytes(password, "password")
        if len(raw) >= simpleenc.KEY_SIZE:
            return raw[:simpleenc.KEY_SIZE]
        return raw + b"\x00" * (simpleenc.KEY_SIZE - len(raw))

    @staticmethod
    def _cipher(key: bytes, iv: bytes) -> Cipher:
        return Cipher(algorithms.AES(key), modes.CBC(iv))

    @staticmethod
    def encrypt(
        plaintext: "typing.Union[str, BytesLike]",
        password: "typing.Union[str, BytesLike]"
    ) -> bytes:
        """Encrypt ``plaintext`` and return ``iv || ciphertext``.

        A fresh random IV is drawn for every call, so encrypting the same data
        twice with the same password yields two different envelopes.
        """
        data = simpleenc._coerce_bytes(plaintext, "plaintext")
        key = simpleenc.prepare_key(password)
        iv = os.urandom(simpleenc.IV_SIZE)
        padder = padding.PKCS7(simpleenc._PADDING_BITS).padder()
        padded = padder.update(data) + padder.finalize()
        encryptor = simpleenc._cipher(key, iv).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return iv + ciphertext

    @staticmethod
    def decrypt(envelope: BytesLike, password: "typing.Union[str, BytesLike]") -> bytes:
        """Split ``envelope`` into IV and ciphertext and return the plaintext.

        Raises ``MalformedEnvelopeError`` when the envelope cannot hold an IV
        and ``DecryptionError`` when the padding check fails.
        """
        if not isinstance(envelope, (bytes, bytearray, memoryview)):
            raise TypeError("decrypt expects bytes")
        blob = bytes(envelope)
        if len(blob) < simpleenc.IV_SIZE:
            raise MalformedEnvelopeError(
                f"Envelope is {len(blob)} bytes; at least {simpleenc.IV_SIZE} are needed for the IV"
            )
        iv = blob[:simpleenc.IV_SIZE]
        ciphertext = blob[simpleenc.IV_SIZE:]
        key = simpleenc.prepare_key(password)
        decryptor = simpleenc._cipher(key, iv).decryptor()
        try:
            padded = decryptor.update(ciphertext) + decryptor.finalize()
            unpadder = padding.PKCS7(simpleenc._PADDING_BITS).unpadder()
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise DecryptionError("Decryption failed; incorrect password or corrupted data") from exc

    @staticmethod
    async def encrypt_async(
        plaintext: "typing.Union[str, BytesLike]",
        password: "typing.Union[str, BytesLike]"
    ) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, simpleenc.encrypt, plaintext, password)

    @staticmethod
    async def decrypt_async(envelope: BytesLike, password: "typing.Union[str, BytesLike]") -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, simpleenc.decrypt, envelope, password)

    @staticmethod
    def to_hex(envelope: BytesLike) -> str:
        return bytes(envelope).hex()

    @staticmethod
    def from_hex(text: str) -> bytes:
        try:
            return bytes.fromhex(text.strip())
        except ValueError as exc:
            raise MalformedEnvelopeError(f"Invalid hex-encoded envelope: {exc}") from exc

    @staticmethod
    def encrypt_hex(
        plaintext: "typing.Union[str, BytesLike]",
        password: "typing.Union[str, BytesLike]"
    ) -> str:
        return simpleenc.to_hex(simpleenc.encrypt(plaintext, password))

    @staticmethod
    def decrypt_hex(text: str, password: "typing.Union[str, BytesLike]") -> bytes:
        return simpleenc.decrypt(simpleenc.from_hex(text), password)


def _read_password_twice() -> str:
    from .prompts import echo, request_password

    while True:
        first = request_password("Enter password: ")
        second = request_password("Enter password again: ")
        if first == second:
            return first
        echo("Passwords don't match. Try again.", color="red")


def cli(argv=None) -> int:
    import argparse
    import pathlib

    from .prompts import echo, request_password
    from .version import __version__

    parser = argparse.ArgumentParser(
        prog="simpleenc",
        description="Encrypt and decrypt messages with AES-256 CBC"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "prompt",
        help="Interactively encrypt a message without writing plaintext to disk"
    )

    enc = subparsers.add_parser("encrypt", help="Encrypt a message and print the hex envelope")
    enc.add_argument("message", help="Message text to encrypt")
    enc.add_argument(
        "-p", "--password",
        default=None,
        help="Password text (prompted twice when omitted)"
    )

    dec = subparsers.add_parser("decrypt", help="Decrypt a hex envelope and print the message")
    dec.add_argument("data", help="Hex-encoded envelope, or a file path with --file")
    dec.add_argument(
        "-p", "--password",
        default=None,
        help="Password text (prompted when omitted)"
    )
    dec.add_argument(
        "--file",
        action="store_true",
        help="Treat DATA as the path of a file holding the hex envelope"
    )

    args = parser.parse_args(argv)

    try:
        if args.command == "prompt":
            from .prompt_encrypt import PromptEncryptSession
            return PromptEncryptSession().run()

        if args.command == "encrypt":
            password = args.password if args.password is not None else _read_password_twice()
            print(simpleenc.encrypt_hex(args.message, password))
            return 0

        if args.command == "decrypt":
            if args.file:
                text = pathlib.Path(args.data).expanduser().read_text(encoding="utf-8")
            else:
                text = args.data
            password = args.password if args.password is not None else request_password("Enter password: ")
            plaintext = simpleenc.decrypt_hex(text, password)
            print(plaintext.decode("utf-8", errors="replace"))
            return 0
    except KeyboardInterrupt:
        echo("\nAborted.", color="red", error=True)
        return 130
    except Exception as exc:
        echo(f"Error: {exc}", color="red", error=True)
        return 1

    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
