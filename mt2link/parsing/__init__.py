"""
This package contains all modules related to parsing data received over the
MT2 serial link.

Sub-packages handle specific layers:

- ``cobs``: COBS byte-stuffing of zero-delimited frames.
- ``registers``: Type registry, tile/master register maps and the message decoder.
- ``frames``: The frame pipeline (split, unstuff, decode) and frame snapshots.
"""
