"""Client for looking up signed entries in a Rekor transparency log."""

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any

import requests
from cryptography import x509

REKOR_INSTANCE_URL_V1 = "https://rekor.sigstore.dev/api/v1"
RETRIEVE_UUID_ENDPOINT = "/index/retrieve"
LOG_ENTRY_ENDPOINT = "/log/entries/"
DEFAULT_TIMEOUT = 60.0


class RekorError(Exception):
    """Raised when the log cannot be queried or returns unusable data."""


@dataclass(frozen=True)
class DecodedBody:
    """The signature and public key carried by a log entry body."""

    signature_content: str = ""
    public_key_content: str = ""


def _field(obj: dict, name: str) -> Any:
    if name in obj:
        return obj[name]
    lowered = name.lower()
    return next((value for key, value in obj.items() if key.lower() == lowered), None)


def _child(obj: dict, name: str) -> dict:
    value = _field(obj, name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RekorError(f"unexpected value for field {name!r}")
    return value


def _text(obj: dict, name: str) -> str:
    value = _field(obj, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RekorError(f"unexpected value for field {name!r}")
    return value


def _b64decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as err:
        raise RekorError(f"invalid base64 data: {err}") from err


def parse_decoded_body(data: "bytes | str") -> DecodedBody:
    """Parse the JSON of a decoded entry body; absent fields become empty."""
    try:
        document = json.loads(data)
    except (ValueError, UnicodeDecodeError) as err:
        raise RekorError(f"invalid entry body: {err}") from err
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise RekorError("entry body is not a JSON object")
    signature = _child(_child(document, "spec"), "signature")
    public_key = _child(signature, "publicKey")
    return DecodedBody(
        signature_content=_text(signature, "content"),
        public_key_content=_text(public_key, "content"),
    )


class RekorClient:
    """Minimal HTTP client for the Rekor v1 API."""

    def __init__(
        self,
        base_url: str = REKOR_INSTANCE_URL_V1,
        session: "requests.Session | None" = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as err:
            raise RekorError(str(err)) from err
        if response.status_code != 200:
            raise RekorError(f"{response.status_code} {response.reason}")
        try:
            return response.json()
        except ValueError as err:
            raise RekorError(f"invalid JSON response: {err}") from err

    def retrieve_uuid(self, sha: str) -> str:
        """Return the UUID of the first log entry for a SHA-256 hex digest."""
        payload = self._request(
            "POST",
            self.base_url + RETRIEVE_UUID_ENDPOINT,
            json={"hash": f"sha256:{sha}"},
        )
        if not isinstance(payload, list) or not payload:
            raise RekorError(f"no log entry found for sha256:{sha}")
        uuid = payload[0]
        if not isinstance(uuid, str):
            raise RekorError("unexpected UUID value in response")
        return uuid

    def log_entry(self, uuid: str) -> DecodedBody:
        """Fetch a log entry and decode its body."""
        payload = self._request("GET", self.base_url + LOG_ENTRY_ENDPOINT + uuid)
        if not isinstance(payload, dict):
            raise RekorError("log entry response is not a JSON object")
        entry = payload.get(uuid)
        if not isinstance(entry, dict):
            raise RekorError(f"log entry {uuid} missing from response")
        return parse_decoded_body(_b64decode(_text(entry, "body")))


def extract_certificate(body: DecodedBody) -> x509.Certificate:
    """Load the PEM certificate held (base64 encoded) in the entry body."""
    pem = _b64decode(body.public_key_content)
    try:
        return x509.load_pem_x509_certificate(pem)
    except ValueError as err:
        raise RekorError("can't decode certificate data") from err


def extract_signature(body: DecodedBody) -> bytes:
    """Return the raw signature bytes from the entry body."""
    return _b64decode(body.signature_content)