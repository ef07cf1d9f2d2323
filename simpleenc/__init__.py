from .main import DecryptionError, MalformedEnvelopeError, SimpleEncError, simpleenc
from .prompts import PromptConfig, ask_question, request_input, request_password
from .version import __version__

def prepare_key(password: bytes): return simpleenc.prepare_key(password)
def encrypt(plaintext, password: bytes): return simpleenc.encrypt(plaintext, password)
def decrypt(envelope: bytes, password: bytes): return simpleenc.decrypt(envelope, password)
async def encrypt_async(plaintext, password: bytes): return await simpleenc.encrypt_async(plaintext, password)
async def decrypt_async(envelope: bytes, password: bytes): return await simpleenc.decrypt_async(envelope, password)

def to_hex(envelope: bytes): return simpleenc.to_hex(envelope)
def from_hex(text: str): return simpleenc.from_hex(text)
def encrypt_hex(plaintext, password: bytes): return simpleenc.encrypt_hex(plaintext, password)
def decrypt_hex(text: str, password: bytes): return simpleenc.decrypt_hex(text, password)

__all__ = [
    "DecryptionError",
    "MalformedEnvelopeError",
    "PromptConfig",
    "SimpleEncError",
    "__version__",
    "ask_question",
    "decrypt",
    "decrypt_async",
    "decrypt_hex",
    "encrypt",
    "encrypt_async",
    "encrypt_hex",
    "from_hex",
    "prepare_key",
    "request_input",
    "request_password",
    "simpleenc",
    "to_hex",
]
