from typing import Iterable

from caesar_breaker.core.exceptions import TableNotFoundError
from caesar_breaker.services.tables.probability import ENGLISH, GERMAN, ProbabilityTable


class TableRegistry:
    """
    Registry for reference probability tables.

    Always holds the bundled English and German tables; extra tables can be
    supplied at construction or registered later. Lookups accept either the
    table name or its language code, case-insensitively.
    """

    BUNDLED: tuple[ProbabilityTable, ...] = (ENGLISH, GERMAN)

    def __init__(self, extra_tables: Iterable[ProbabilityTable] = ()):
        self._tables: dict[str, ProbabilityTable] = {}
        for table in (*self.BUNDLED, *extra_tables):
            self.register(table)

    def register(self, table: ProbabilityTable) -> ProbabilityTable:
        """
        Register a probability table, replacing any table of the same name.

        Args:
            table: The table to register

        Returns:
            The table (for chaining)
        """
        self._tables[table.name.lower()] = table
        return table

    def get(self, name: str) -> ProbabilityTable:
        """
        Get a table by name or language code.

        Raises:
            TableNotFoundError: If no table matches
        """
        key = name.lower()
        if key in self._tables:
            return self._tables[key]

        for table in self._tables.values():
            if table.code.lower() == key:
                return table

        raise TableNotFoundError(name)

    def list_registered(self) -> list[str]:
        """List all registered table names."""
        return list(self._tables.keys())

    def get_all_tables(self) -> list[ProbabilityTable]:
        return list(self._tables.values())

    def is_registered(self, name: str) -> bool:
        try:
            self.get(name)
        except TableNotFoundError:
            return False
        return True
