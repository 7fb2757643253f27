### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Storage (adaptery):
#     * brak pliku to NIE błąd (pusta lista),
#     * mapują błędy techniczne (OSError, UnicodeDecodeError) na StorageError,
#     * zła linia w pliku → TaskValidationError (z numerem linii).
#
# - Komendy:
#     * pozycja spoza listy → InvalidTaskNumberError (nigdy surowy IndexError)
#
# - Parser:
#     * nierozpoznane polecenie lub złe argumenty → CommandParseError
#
# - UI (CLI):
#     * łapie NaegaError i wyświetla przyjazny komunikat
#     * wszystko inne traktuje jako błąd techniczny


class NaegaError(Exception):
    """Bazowa klasa dla błędów aplikacji.
    Jedyny kanał błędów widocznych dla użytkownika: pętla CLI łapie `NaegaError`,
    renderuje komunikat i kontynuuje sesję.
    Nie powinna być rzucana bezpośrednio — używaj klas pochodnych.
    """

class StorageError(NaegaError):
    """Rzucany, gdy odczyt lub zapis pliku zadań się nie powiódł (uprawnienia, I/O).
    Brak pliku przy odczycie nie jest błędem — Storage zwraca wtedy pustą listę.
    """
    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(self.__str__())
    def __str__(self):
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"

class TaskValidationError(NaegaError):
    """Rzucany, gdy dane zadania nie spełniają reguł formatu.
    Przykłady:
    - nieznany typ zadania w pliku,
    - za mało pól dla Deadline/Event,
    - opis zawiera separator ` | `.
    `field` wskazuje, czego dotyczy błąd (np. "type", "description", "line 3").
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"{self.message} ({self.field})"

class TimestampParseError(TaskValidationError):
    """Rzucany, gdy znacznik czasu nie pasuje do wzorca `yyyy-MM-dd HHmm`."""
    def __init__(self, value: str, field: str = "timestamp"):
        self.value = value
        super().__init__(field, f"Cannot parse '{value}', expected yyyy-MM-dd HHmm")


class InvalidTaskNumberError(NaegaError):
    """Rzucany, gdy numer zadania (1-based) wskazuje poza listę."""
    def __init__(self, number: int):
        self.number = number
        super().__init__(self.__str__())
    def __str__(self):
        return "Invalid task number."

class CommandParseError(NaegaError):
    """Rzucany przez parser, gdy linii wejścia nie da się zamienić na komendę."""
    def __init__(self, message: str, usage: str | None = None):
        self.message = message
        self.usage = usage
        super().__init__(self.__str__())
    def __str__(self):
        if self.usage:
            return f"{self.message} Usage: {self.usage}"
        return self.message
