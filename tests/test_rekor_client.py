import base64
import datetime
import json

import pytest
import responses
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from rekorcheck.rekor_client import (
    LOG_ENTRY_ENDPOINT,
    RETRIEVE_UUID_ENDPOINT,
    DecodedBody,
    RekorClient,
    RekorError,
    extract_certificate,
    extract_signature,
    parse_decoded_body,
)

BASE_URL = "https://rekor.example.com/api/v1"
SHA = "442d8baafc0c3a873b21a3add32f5c65f538fb5cbcf4a4a69ba098a2b730c5d2"


@pytest.fixture(scope="module")
def certificate():
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "test signer")])
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(datetime.datetime(2024, 1, 1))
        .not_valid_after(datetime.datetime(2030, 1, 1))
        .sign(key, hashes.SHA256())
    )


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode()


def _entry_body(signature: bytes, certificate) -> dict:
    pem = certificate.public_bytes(serialization.Encoding.PEM)
    return {"spec": {"signature": {"content": _b64(signature), "publicKey": {"content": _b64(pem)}}}}


def test_retrieve_uuid_returns_first_and_sends_hash():
    client = RekorClient(BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, BASE_URL + RETRIEVE_UUID_ENDPOINT, json=["uuid1", "uuid2"])
        assert client.retrieve_uuid(SHA) == "uuid1"
        sent = json.loads(rsps.calls[0].request.body)
    assert sent == {"hash": "sha256:" + SHA}


def test_retrieve_uuid_error_status():
    client = RekorClient(BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, BASE_URL + RETRIEVE_UUID_ENDPOINT, status=500)
        with pytest.raises(RekorError):
            client.retrieve_uuid(SHA)


def test_retrieve_uuid_empty_list():
    client = RekorClient(BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, BASE_URL + RETRIEVE_UUID_ENDPOINT, json=[])
        with pytest.raises(RekorError, match="no log entry"):
            client.retrieve_uuid(SHA)


def test_log_entry_decodes_body(certificate):
    body = _entry_body(b"\x01\x02", certificate)
    encoded = _b64(json.dumps(body).encode())
    client = RekorClient(BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE_URL + LOG_ENTRY_ENDPOINT + "uuid1", json={"uuid1": {"body": encoded}})
        decoded = client.log_entry("uuid1")
    assert decoded.signature_content == body["spec"]["signature"]["content"]
    assert decoded.public_key_content == body["spec"]["signature"]["publicKey"]["content"]


def test_log_entry_missing_uuid():
    client = RekorClient(BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE_URL + LOG_ENTRY_ENDPOINT + "uuid1", json={"other": {"body": ""}})
        with pytest.raises(RekorError):
            client.log_entry("uuid1")


def test_log_entry_not_found():
    client = RekorClient(BASE_URL)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE_URL + LOG_ENTRY_ENDPOINT + "uuid1", status=404)
        with pytest.raises(RekorError):
            client.log_entry("uuid1")


def test_parse_decoded_body_missing_fields_are_empty():
    assert parse_decoded_body(b"{}") == DecodedBody("", "")


def test_parse_decoded_body_case_insensitive_keys():
    data = json.dumps({"Spec": {"SIGNATURE": {"Content": "c2ln", "publickey": {"content": "a2V5"}}}})
    assert parse_decoded_body(data) == DecodedBody("c2ln", "a2V5")


def test_parse_decoded_body_invalid_json():
    with pytest.raises(RekorError):
        parse_decoded_body(b"not json")


def test_extract_certificate_round_trip(certificate):
    body = parse_decoded_body(json.dumps(_entry_body(b"", certificate)))
    assert extract_certificate(body).serial_number == certificate.serial_number


def test_extract_certificate_without_pem():
    body = DecodedBody(public_key_content=_b64(b"no certificate here"))
    with pytest.raises(RekorError, match="can't decode certificate data"):
        extract_certificate(body)


def test_extract_signature_round_trip():
    raw = bytes(range(70))
    assert extract_signature(DecodedBody(signature_content=_b64(raw))) == raw


def test_extract_signature_invalid_base64():
    with pytest.raises(RekorError):
        extract_signature(DecodedBody(signature_content="***"))