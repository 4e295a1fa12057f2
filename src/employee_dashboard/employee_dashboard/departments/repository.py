from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        """All departments ordered by name, with manager name/email joined."""
        raise NotImplementedError

    def get_by_id(self, dept_id: int) -> Optional[Department]:
        raise NotImplementedError

    def create(self, *, dept_name: str, manager_id: Optional[int]) -> int:
        raise NotImplementedError

    def update(self, *, dept_id: int, dept_name: str, manager_id: Optional[int]) -> bool:
        raise NotImplementedError

    def delete_by_id(self, dept_id: int) -> bool:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError
