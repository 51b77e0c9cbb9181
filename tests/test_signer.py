import base64

from sas_signer.token.signer import sign


def test_hmac_sha256_known_answer() -> None:
    # RFC 4231 test case 2
    sig = sign(b"Jefe", "what do ya want for nothing?")
    assert base64.b64decode(sig) == bytes.fromhex(
        "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


def test_signature_is_padded_standard_base64_of_32_bytes() -> None:
    sig = sign(bytes(range(1, 33)), "message")
    assert len(sig) == 44
    assert sig.endswith("=")
    assert len(base64.b64decode(sig, validate=True)) == 32


def test_sign_is_deterministic_across_input_types() -> None:
    key = bytes(range(1, 33))
    assert sign(key, "abc\n") == sign(key, "abc\n")
    assert sign(key, "abc\n") == sign(bytearray(key), b"abc\n")
    assert sign(key, "abc\n") != sign(key, "abc")
