"""Byte-array formatting helpers."""

from typing import Iterable, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class ByteFormatter:
    """Turns raw bytes into hex-like strings."""

    @staticmethod
    def format_bytes(data: Optional[BytesLike], fmt: str = "%02x") -> str:
        """
        Format each byte with ``fmt`` and concatenate the results.

        Args:
            data: Bytes, or an iterable of ints. Ints are masked to 0-255, so
                signed byte values format the same as unsigned ones.
            fmt: A printf-style spec such as ``"%02x"``, or a format-spec
                such as ``"02X"`` passed to ``format()``

        Returns:
            The concatenated string, e.g. ``[0x0A, 0xFF]`` -> ``"0aff"``

        Raises:
            TypeError: If an item of ``data`` is not an int
            ValueError: If ``fmt`` cannot format a single integer
        """
        if not data:
            return ""

        values = []
        for b in data:
            if not isinstance(b, int):
                raise TypeError(f"Byte values must be ints, got {type(b).__name__}: {b!r}")
            values.append(b & 0xFF)

        try:
            if '%' in fmt:
                return "".join(fmt % b for b in values)
            return "".join(format(b, fmt) for b in values)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid byte format {fmt!r}: {e}") from e
