"""Database protocols for neo-catalog."""

from abc import abstractmethod
from typing import Any, AsyncContextManager, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class DatabaseRepository(Protocol):
    """Minimal query surface repositories depend on."""

    @abstractmethod
    async def execute_query(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        """Execute a query and return all rows."""
        ...

    @abstractmethod
    async def execute_fetchrow(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        """Execute a query and return a single row."""
        ...

    @abstractmethod
    async def execute_fetchval(self, query: str, *args: Any) -> Any:
        """Execute a query and return a single value."""
        ...

    @abstractmethod
    async def execute_command(self, command: str, *args: Any) -> str:
        """Execute a command and return its status."""
        ...

    @abstractmethod
    def transaction(self) -> AsyncContextManager[Any]:
        """Open a transaction, yielding a connection with the same methods."""
        ...
