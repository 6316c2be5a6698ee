# mavcore

Small building blocks for MAVLink clients, with no dependencies outside the
standard library.

## Contents

### `mavcore.types`

Type aliases for protocol values (`SystemId`, `ComponentId`, `MavLinkId`,
`Sequence`, `PayloadLength`, `Checksum`, `SignedLinkId`, `SignatureValue`) and
the constant `SIGNATURE_VALUE_LENGTH` (6).

`Behold(value)` wraps a value whose use needs the caller's attention. Take the
value with `unwrap()` or drop it with `discard()`.

### `mavcore.signer`

`MavSha256` computes `sha256_48`, the MAVLink 2 signing hash: SHA-256 truncated
to its first 6 bytes.

- `digest(data)` feeds bytes to the hash.
- `produce()` returns the 6-byte signature of everything digested so far; the
  state is kept, so more data can be digested afterwards.
- `reset()` forgets all digested data.

### `mavcore.slice_rw`

`SliceReader(content)` reads from a fixed block of bytes:

- `read_exact(size)` returns exactly `size` bytes and advances the cursor. If
  fewer bytes remain it raises `EOFError` and leaves the cursor where it was;
  a negative `size` raises `ValueError`.
- `num_remaining_bytes()`, and the `pos` and `content` properties.

`SliceWriter(buffer)` writes into a `bytearray` or writable `memoryview` in
place (a read-only buffer raises `TypeError`):

- `write_all(data)` writes all of `data` and advances the cursor. If the buffer
  lacks space it raises `EOFError` and writes nothing.
- `flush()` does nothing to the buffer and returns the number of bytes written
  so far.
- `num_remaining_bytes()`, `pos`, and `content` (a copy of the whole buffer).

### `mavcore.update`

`TryUpdateFrom` is an abstract base class for objects that update themselves
from another value. Subclasses implement `check_try_update_from(value)`, which
raises when the update is impossible, and `update_from_unchecked(value)`, which
performs it. `try_update_from(value)` runs the check first, so a failed check
leaves the object untouched.

## Example

```python
from mavcore.signer import MavSha256
from mavcore.slice_rw import SliceReader, SliceWriter

signer = MavSha256()
signer.digest(b"\x01\x02\x03")
signature = signer.produce()          # 6 bytes

buffer = bytearray(10)
writer = SliceWriter(buffer)
writer.write_all(b"\x00\x01\x02\x03\x04")
print(writer.num_remaining_bytes())   # 5

reader = SliceReader(bytes(range(10)))
print(reader.read_exact(5))           # b'\x00\x01\x02\x03\x04'
```

## What it does not do

This package does not build, encode, decode or validate MAVLink frames, does
not compute frame checksums, holds no message definitions or dialects, and has
no sender or receiver for connections. It provides only the pieces listed
above.

## Installation

```
pip install mavcore
```

## Running the tests

```
pip install -e ".[test]"
pytest
```