# cryptoprims

Cryptographic primitives in pure Python, with no dependencies outside the
standard library. The hashes and commitments work over a twisted Edwards
curve. The Jubjub curve is provided.

## Modules

- `cryptoprims.curves` has `TwistedEdwardsCurve` and `EdwardsPoint`, which give
  affine point arithmetic (`+`, `-`, negation, `double`, `mul`, `*` by an
  integer) and `to_uncompressed_bytes`. `jubjub()` returns the Jubjub curve.
  `TwistedEdwardsCurve.random_point(rng)` samples a non-identity point of the
  prime-order subgroup.
- `cryptoprims.pedersen` has `PedersenCRH` and `PedersenTwoToOneCRH`. Each is
  configured by a curve and a `Window(window_size, num_windows)`. Both return
  an `EdwardsPoint`. The module also has `Parameters` and `bytes_to_bits`.
- `cryptoprims.bowe_hopwood` has `BoweHopwoodCRH` and `BoweHopwoodTwoToOneCRH`.
  They encode the input in signed 3-bit chunks and return the x coordinate of
  the resulting point as an integer. `BoweHopwoodCRH.max_window_size()` gives
  the largest window size that `setup` accepts.
- `cryptoprims.injective_map` has `TECompressor`, which maps a prime-order
  point to its x coordinate and raises `NotPrimeOrder` for any other point. It
  also has `PedersenCRHCompressor` and `PedersenTwoToOneCRHCompressor`.
- `cryptoprims.commitment` has `PedersenCommitment` (with
  `CommitmentParameters` and `random_randomness`), `PedersenCommCompressor`,
  and `Blake2sCommitment`. `Blake2sCommitment` takes BLAKE2s-256 of the message
  followed by exactly 32 bytes of randomness.
- `cryptoprims.sha256` has an incremental `Sha256` hasher (`update`,
  `finalize`, and the class method `digest`), plus `Sha256CRH` and
  `Sha256TwoToOneCRH`. The two-to-one hash takes SHA-256 of the left input
  followed by the right input.
- `cryptoprims.bitops` has helpers for 32-bit words: `rotr`, `shr`, `bitnot`,
  `bitand`, `from_bytes_be` and `to_bytes_be`.
- `cryptoprims.schemes` defines the abstract interfaces `CRHScheme`,
  `TwoToOneCRHScheme`, `CommitmentScheme` and `AsymmetricEncryptionScheme`.
- `cryptoprims.errors` has `CryptoError` and its subclasses
  `IncorrectInputLength` and `NotPrimeOrder`.

Every `setup` method takes a `random.Random` instance. The same parameters
and the same input always give the same output.

## Installation

```
pip install .
```

## Example

```python
import random

from cryptoprims.curves import jubjub
from cryptoprims.pedersen import PedersenCRH, Window
from cryptoprims.commitment import PedersenCommitment
from cryptoprims.sha256 import Sha256

rng = random.Random(0)
curve = jubjub()

crh = PedersenCRH(curve, Window(window_size=127, num_windows=9))
params = crh.setup(rng)
digest = crh.evaluate(params, b"hello")      # an EdwardsPoint

comm = PedersenCommitment(curve, Window(window_size=4, num_windows=9))
cparams = comm.setup(rng)
r = comm.random_randomness(rng)
c = comm.commit(cparams, bytes([1, 1, 1, 1]), r)

Sha256.digest(b"abc").hex()
```

## Errors

- The Pedersen and Bowe-Hopwood hashes and the Pedersen commitments raise
  `IncorrectInputLength` when the input is longer than the window allows.
  `Blake2sCommitment` raises it when the randomness is not 32 bytes.
- The two-to-one hashes raise `ValueError` when the left and right inputs
  differ in length.
- The hashes raise `ValueError` when the parameters do not match the window
  shape.

## What the package does not do

- `AsymmetricEncryptionScheme` is only an interface. The package has no
  encryption scheme that implements it.
- The package has no arithmetic-circuit or constraint-system versions of these
  primitives. It computes them natively only.
- The point arithmetic is plain Python integer arithmetic. It is neither
  constant-time nor fast, so large windows make `setup` and `evaluate` slow.

## Tests

```
pip install .[test]
pytest
```