# ppmdecode/errors.py


class PPMError(ValueError):
    """Wspólna baza błędów dekodera PPM."""


class HeaderError(PPMError):
    """Nagłówek nie jest poprawnym nagłówkiem P3/P6."""

    def __init__(self, msg="ppm: nieprawidłowy nagłówek"):
        super().__init__(msg)


class UnsupportedFormatError(PPMError):
    """Poprawny nagłówek, ale format nieobsługiwany (np. maxval != 255)."""

    def __init__(self, msg="ppm: nieobsługiwany format (maxval != 255)"):
        super().__init__(msg)


class NotEnoughDataError(PPMError):
    """Dane obrazu urwane albo niepoprawne przed ostatnim pikselem."""

    def __init__(self, msg="ppm: za mało danych obrazu"):
        super().__init__(msg)
