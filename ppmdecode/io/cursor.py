# ppmdecode/io/cursor.py
from typing import Optional

from ..constants import BUFFER_SIZE


class ByteCursor:
    """
    Buforowany odczyt bajtów „do przodu” ze strumienia binarnego.
    Tylko kursor czyta strumień; nie zamyka go (strumień należy do wywołującego).
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE):
        self._stream = stream
        self._buffer_size = buffer_size
        self._buf = b""
        self._pos = 0
        self.consumed = 0  # ile bajtów oddano dotąd

    def _fill(self) -> bool:
        chunk = self._stream.read(self._buffer_size)
        if not chunk:
            return False
        self._buf = bytes(chunk)
        self._pos = 0
        return True

    def read_byte(self) -> Optional[int]:
        """Zwraca kolejny bajt (int) albo None na końcu strumienia."""
        if self._pos >= len(self._buf) and not self._fill():
            return None
        b = self._buf[self._pos]
        self._pos += 1
        self.consumed += 1
        return b

    def read_exact(self, n: int) -> bytes:
        """Czyta do n bajtów; krótszy wynik oznacza koniec strumienia."""
        out = bytearray()
        while len(out) < n:
            if self._pos >= len(self._buf) and not self._fill():
                break
            take = min(n - len(out), len(self._buf) - self._pos)
            out += self._buf[self._pos : self._pos + take]
            self._pos += take
        self.consumed += len(out)
        return bytes(out)
