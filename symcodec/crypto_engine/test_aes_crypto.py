import pickle

import pytest
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from symcodec.crypto_engine import (
    AESCBCCipher, CipherFactory, CipherProfile,
    KeyGenerationError, EncodingError, DecodingError,
)
from symcodec.crypto_engine import aes_crypto


# NIST SP 800-38A, F.2.1 CBC-AES128.Encrypt, first block
NIST_KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
NIST_IV  = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
NIST_PT  = bytes.fromhex("6bc1bee22e409f96e93d7e117393172a")
NIST_CT  = bytes.fromhex("7649abac8119b246cee98e9b12e9197d")


def test_known_answer_first_block():
    cipher = AESCBCCipher(NIST_KEY)
    ct = cipher.encrypt(NIST_IV, NIST_PT)
    # full block of plaintext → one extra block of padding
    assert len(ct) == 32
    assert ct[:16] == NIST_CT
    assert cipher.decrypt(NIST_IV, ct) == NIST_PT


@pytest.mark.parametrize("size", [16, 24, 32])
def test_engine_round_trip(size):
    cipher = AESCBCCipher(b"k" * size)
    iv = b"\x01" * 16
    for data in (b"", b"a", b"b" * 16, b"c" * 100):
        assert cipher.decrypt(iv, cipher.encrypt(iv, data)) == data


@pytest.mark.parametrize("size", [0, 8, 15, 17, 64])
def test_bad_key_length(size):
    with pytest.raises(KeyGenerationError):
        AESCBCCipher(b"\x00" * size)


def test_key_must_be_bytes():
    with pytest.raises(KeyGenerationError):
        AESCBCCipher("0123456789abcdef")


def test_unsupported_backend(monkeypatch):
    def no_aes(*args, **kwargs):
        raise UnsupportedAlgorithm("AES not available")

    monkeypatch.setattr(aes_crypto, "Cipher", no_aes)
    with pytest.raises(KeyGenerationError):
        AESCBCCipher(b"\x00" * 16)


def test_encrypt_wrong_iv_length():
    with pytest.raises(EncodingError):
        AESCBCCipher(b"\x00" * 16).encrypt(b"\x00" * 8, b"data")


def test_decrypt_wrong_iv_length():
    with pytest.raises(DecodingError):
        AESCBCCipher(b"\x00" * 16).decrypt(b"\x00" * 8, b"\x00" * 16)


@pytest.mark.parametrize("length", [0, 1, 15, 33])
def test_decrypt_length_reason(length):
    with pytest.raises(DecodingError) as info:
        AESCBCCipher(b"\x00" * 16).decrypt(b"\x00" * 16, b"\x00" * length)
    assert info.value.reason == "length"


def test_decrypt_padding_reason():
    key, iv = b"\x00" * 16, b"\x00" * 16
    enc = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    # unpadded block ending in 0x00 is never valid PKCS7
    ct = enc.update(b"B" * 15 + b"\x00") + enc.finalize()
    with pytest.raises(DecodingError) as info:
        AESCBCCipher(key).decrypt(iv, ct)
    assert info.value.reason == "padding"


def test_cipher_metadata():
    cipher = AESCBCCipher(b"\x00" * 24)
    assert cipher.cipher_name == "AES-192-CBC"
    assert cipher.key_size == 24
    assert cipher.key_size_bits == 192
    assert cipher.block_size == 16
    assert cipher.iv_size == 16
    assert cipher.is_aead is False
    info = cipher.info()
    assert info["name"] == "AES-192-CBC"
    assert info["auth_method"] == "None"
    assert "00" * 24 not in repr(cipher)


# ── profiles ─────────────────────────────────────────────────────

@pytest.mark.parametrize("value,expected", [
    (CipherProfile.AES_256_CBC, CipherProfile.AES_256_CBC),
    ("AES-128-CBC", CipherProfile.AES_128_CBC),
    ("aes-192-cbc", CipherProfile.AES_192_CBC),
    ("AES_256_CBC", CipherProfile.AES_256_CBC),
    (128, CipherProfile.AES_128_CBC),
    (192, CipherProfile.AES_192_CBC),
    (256, CipherProfile.AES_256_CBC),
])
def test_profile_from_value(value, expected):
    assert CipherProfile.from_value(value) is expected


@pytest.mark.parametrize("value", [True, 0, 100, "AES", None, b"AES-128-CBC"])
def test_profile_from_value_rejects(value):
    with pytest.raises(KeyGenerationError):
        CipherProfile.from_value(value)


def test_profile_sizes():
    assert [(p.key_bits, p.key_size, p.block_size) for p in CipherProfile] == [
        (128, 16, 16), (192, 24, 16), (256, 32, 16),
    ]


# ── factory ──────────────────────────────────────────────────────

def test_factory_create():
    cipher = CipherFactory.create("AES-256-CBC", b"\x00" * 32)
    assert isinstance(cipher, AESCBCCipher)
    assert cipher.cipher_name == "AES-256-CBC"


def test_factory_rejects_wrong_key_length():
    with pytest.raises(KeyGenerationError):
        CipherFactory.create(CipherProfile.AES_128_CBC, b"\x00" * 32)


def test_factory_discovery():
    assert CipherFactory.list_profiles() == [
        CipherProfile.AES_256_CBC,
        CipherProfile.AES_192_CBC,
        CipherProfile.AES_128_CBC,
    ]
    assert CipherFactory.is_available("AES-128-CBC")
    assert not CipherFactory.is_available("CHACHA20-POLY1305")
    assert CipherFactory.get_required_key_size(192) == 24

    info = CipherFactory.get_info(CipherProfile.AES_128_CBC)
    assert info["key_bits"] == 128
    assert info["aead"] is False
    assert [i["name"] for i in CipherFactory.get_all_info()] == [
        "AES-256-CBC", "AES-192-CBC", "AES-128-CBC",
    ]


# ── errors ───────────────────────────────────────────────────────

@pytest.mark.parametrize("reason", ["length", "padding", "text"])
def test_decoding_error_pickles(reason):
    err = pickle.loads(pickle.dumps(DecodingError("bad", reason)))
    assert isinstance(err, DecodingError)
    assert str(err) == "bad"
    assert err.reason == reason


def test_cipher_info_has_no_auth():
    info = AESCBCCipher(b"\x00" * 16).info()
    assert info["aead"] is False
    assert info["auth_method"] == "None"
