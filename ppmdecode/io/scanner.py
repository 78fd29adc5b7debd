# ppmdecode/io/scanner.py
from typing import Callable, List, Optional

from ..constants import COMMENT, NEWLINE, WHITESPACE
from .cursor import ByteCursor


def is_whitespace(b: int) -> bool:
    return b in WHITESPACE


class TokenScanner:
    """
    Tokenizer z pomijaniem komentarzy – wspólny dla nagłówka i danych P3.

    '#' poza komentarzem włącza tryb komentarza, '\\n' go kończy; bajty komentarza
    nie trafiają do tokenu. Poza komentarzem bajt-terminator zamyka bieżący token,
    pozostałe bajty są doklejane. Ciąg kilku terminatorów nie daje pustych tokenów.
    """

    def __init__(
        self,
        cursor: ByteCursor,
        is_terminator: Callable[[int], bool] = is_whitespace,
    ):
        self.cursor = cursor
        self.is_terminator = is_terminator

    def next_token(self) -> Optional[bytes]:
        """Kolejny token albo None, gdy strumień skończył się bez treści."""
        tok = bytearray()
        in_comment = False
        while True:
            b = self.cursor.read_byte()
            if b is None:
                # koniec strumienia zamyka niepusty token
                return bytes(tok) if tok else None
            if in_comment:
                if b == NEWLINE:
                    in_comment = False
                continue
            if b == COMMENT:
                in_comment = True
                continue
            if self.is_terminator(b):
                if tok:
                    return bytes(tok)
                continue
            tok.append(b)

    def tokens(self, count: int) -> List[bytes]:
        """Do `count` tokenów; mniej tylko przy końcu strumienia."""
        out: List[bytes] = []
        while len(out) < count:
            tok = self.next_token()
            if tok is None:
                break
            out.append(tok)
        return out
