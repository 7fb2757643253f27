from typing import Protocol, Sequence
from naega.domain.task import Task


### COMMENTS
# ==========================================================
# Kontrakt trwałości listy zadań (ports/storage.py).
# ==========================================================
# - Niezależny od technologii (plik tekstowy, pamięć).
# - Storage nie trzyma kopii listy: każdy load/save czyta/zapisuje całość.
# - Adaptery mapują błędy techniczne na `StorageError`,
#   a uszkodzone dane na `TaskValidationError`.


class TaskStorage(Protocol):
    """Interfejs do odczytu i zapisu całej listy zadań."""

    def load(self) -> list[Task]:
        """Odtwarza pełną, uporządkowaną listę zadań.

        Zwraca:
            list[Task]: Zadania w kolejności zapisu; pusta lista, gdy nic jeszcze nie zapisano.

        Wyjątki domenowe:
            StorageError: Błąd odczytu inny niż brak danych.
            TaskValidationError: Uszkodzony wpis — odczyt przerywany w całości (bez częściowej listy).
        """

    def save(self, tasks: Sequence[Task]) -> None:
        """Nadpisuje zapisane dane podaną listą (zawsze całość, nigdy dopisywanie).

        Wyjątki domenowe:
            StorageError: Zapis się nie powiódł. Lista w pamięci pozostaje bez zmian.
        """
