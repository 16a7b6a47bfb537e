from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..cadence.model import CadenceConfig
from .model import PaymentRecord, Student


class DuesRepository(Protocol):
    """Read access the dues service needs; implemented by the host application."""

    def get_active_cadence(self, scope_id: str) -> Optional[CadenceConfig]:
        raise NotImplementedError

    def list_students(self, class_id: str) -> Sequence[Student]:
        raise NotImplementedError

    def list_payments(self, scope_id: str, *, student_id: Optional[str] = None) -> Sequence[PaymentRecord]:
        raise NotImplementedError
