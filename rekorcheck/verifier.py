"""Verification of artifact digests against certificates found in Rekor."""

import os
from dataclasses import dataclass
from typing import Optional

from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from .rekor_client import RekorClient, extract_certificate, extract_signature
from .utils import calculate_sha256, check_path_to_file

_PREHASHED_ALGORITHMS = {
    28: hashes.SHA224,
    32: hashes.SHA256,
    48: hashes.SHA384,
    64: hashes.SHA512,
}


class UnsupportedKeyError(Exception):
    """Raised when the certificate's public key algorithm is not handled."""


@dataclass
class CertificateVerifier:
    """Checks a signature over a hex digest with a certificate's public key."""

    certificate: x509.Certificate
    signature: bytes
    sha: str

    def verify(self) -> bool:
        """Return True if the signature matches the digest."""
        key = self.certificate.public_key()
        if not isinstance(key, ec.EllipticCurvePublicKey):
            raise UnsupportedKeyError("public key algorithm not supported")
        digest = bytes.fromhex(self.sha)
        algorithm = _PREHASHED_ALGORITHMS.get(len(digest))
        if algorithm is None:
            raise ValueError(f"unsupported digest length: {len(digest)} bytes")
        try:
            key.verify(self.signature, digest, ec.ECDSA(Prehashed(algorithm())))
        except InvalidSignature:
            return False
        return True


def verify_sha(sha: str, client: Optional[RekorClient] = None) -> bool:
    """Look up ``sha`` in the log and verify the stored signature."""
    client = client if client is not None else RekorClient()
    uuid = client.retrieve_uuid(sha)
    body = client.log_entry(uuid)
    verifier = CertificateVerifier(
        certificate=extract_certificate(body),
        signature=extract_signature(body),
        sha=sha,
    )
    return verifier.verify()


def verify_file(path: "str | os.PathLike[str]", client: Optional[RekorClient] = None) -> bool:
    """Hash the file at ``path`` and verify its digest against the log."""
    check_path_to_file(path)
    with open(path, "rb") as stream:
        sha = calculate_sha256(stream).hexdigest()
    return verify_sha(sha, client)