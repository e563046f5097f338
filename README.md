# rekorcheck

`rekorcheck` checks that a binary was signed. It uses the signature and
signing certificate that were published for the binary in a Rekor
transparency log.

Give it a file or the SHA-256 digest of a file. `rekorcheck` then does three
things:

1. It asks the log for the entries recorded for that digest and takes the
   first one.
2. It reads the signature and the PEM signing certificate from that entry.
3. It checks the signature against the digest, using the certificate's public
   key.

Only certificates with ECDSA (elliptic-curve) public keys are supported.

## Installation

```
pip install .
```

## Command-line use

To verify a file on disk:

```
rekorcheck --path ./apko_linux_amd64.tar.gz
```

To verify a SHA-256 digest you already know, written in hex:

```
rekorcheck --sha 442d8baafc0c3a873b21a3add32f5c65f538fb5cbcf4a4a69ba098a2b730c5d2
```

You must give exactly one of `--path` (`-p`) or `--sha` (`-s`).

The command writes timestamped log lines to standard output, each prefixed
with `rekor-verifier`. Its exit status works as follows:

- It exits with status 0 when the signature verifies.
- It exits with status 1 and logs `Verification unsuccessful` when the
  signature does not match.
- It also exits with status 1, logging the reason, when it cannot complete the
  check. Examples are a missing file, a failed lookup, a malformed entry, or an
  unsupported key type.

`rekorcheck --version` (or `-v`) prints the build version in the form
`dev-n/a (n/a)`.

## Library use

```python
from rekorcheck.rekor_client import RekorClient
from rekorcheck.verifier import verify_file, verify_sha

ok = verify_file("apko_linux_amd64.tar.gz")

client = RekorClient("https://rekor.example.com/api/v1")
ok = verify_sha("442d8baafc0c3a873b21a3add32f5c65f538fb5cbcf4a4a69ba098a2b730c5d2", client)
```

### Verification

- `verify_file(path, client=None)` and `verify_sha(sha, client=None)` return
  `True` or `False`.
- When no client is given, they use a `RekorClient` that points at the public
  Rekor v1 API (`rekorcheck.rekor_client.REKOR_INSTANCE_URL_V1`). Its request
  timeout is 60 seconds.
- If you already hold a certificate and a signature, check them directly with
  `CertificateVerifier(certificate=..., signature=..., sha=...).verify()`.
  - The signature is checked over the digest bytes themselves, without hashing
    them again.
  - The digest must be 28, 32, 48 or 64 bytes long.

### Lower-level helpers

- `RekorClient.retrieve_uuid(sha)` returns the UUID of the first entry found
  for a digest.
- `RekorClient.log_entry(uuid)` fetches an entry and returns a `DecodedBody`.
- `extract_certificate(body)` and `extract_signature(body)` turn a
  `DecodedBody` into an `x509.Certificate` and raw signature bytes.
- `rekorcheck.utils.calculate_sha256(stream)` hashes a binary stream.
- `rekorcheck.utils.check_path_to_file(path)` checks that a path names a
  regular file.

### Errors

- `RekorError`: the log could not be queried or returned unusable data.
- `UnsupportedKeyError`: the certificate's key is not an elliptic-curve key.
- `PathError`: the path is missing or is not a regular file.
- `ValueError`: the digest is not valid hex or has an unsupported length.

## What it does not do

- It does not check the signing certificate's chain, validity period or
  identity. It only checks that the certificate's key verifies the signature.
- It does not verify log inclusion proofs or signed entry timestamps.
- The command line always queries the public Rekor instance. To use another
  instance, pass your own `RekorClient` to the library functions.
- It reads only entries that carry a signature and a public key certificate.
  It supports no keys other than ECDSA keys.

## Running the tests

```
pip install .[test]
pytest
```