"""MAVLink protocol type aliases, sha256_48 signing and in-memory byte I/O."""

__version__ = "0.5.10"