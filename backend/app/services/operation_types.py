"""
Operation type registry.

An operation type classifies a transaction as a debit (stored negative) or a
credit (stored positive). The registry is built once at process start and
handed to TransactionService; it is read-only afterwards.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType


class OperationClassification(str, Enum):
    """Movement direction of an operation type."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


@dataclass(frozen=True)
class OperationType:
    id: int
    description: str
    classification: OperationClassification

    @property
    def is_debit(self) -> bool:
        return self.classification is OperationClassification.DEBIT

    def signed_amount(self, amount: Decimal) -> Decimal:
        """
        Apply this operation type's sign to a caller-supplied amount.

        The caller's sign is discarded: debit stores the negated magnitude,
        credit the magnitude itself.
        """
        magnitude = abs(amount)
        return -magnitude if self.is_debit else magnitude


class OperationTypeRegistry(Mapping[int, OperationType]):
    """Immutable mapping of operation type code -> OperationType."""

    def __init__(self, operation_types: Iterable[OperationType]):
        by_code: dict[int, OperationType] = {}
        for operation_type in operation_types:
            if operation_type.id in by_code:
                raise ValueError(f"Duplicate operation type code: {operation_type.id}")
            by_code[operation_type.id] = operation_type
        self._by_code = MappingProxyType(by_code)

    def __getitem__(self, code: int) -> OperationType:
        return self._by_code[code]

    def __iter__(self) -> Iterator[int]:
        return iter(self._by_code)

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"OperationTypeRegistry({list(self._by_code.values())!r})"


DEFAULT_OPERATION_TYPES: tuple[OperationType, ...] = (
    OperationType(1, "COMPRA A VISTA", OperationClassification.DEBIT),
    OperationType(2, "COMPRA PARCELADA", OperationClassification.DEBIT),
    OperationType(3, "SAQUE", OperationClassification.DEBIT),
    OperationType(4, "PAGAMENTO", OperationClassification.CREDIT),
    )


def build_default_registry() -> OperationTypeRegistry:
    """Registry with the four standard operation types (three debits, one credit)."""
    return OperationTypeRegistry(DEFAULT_OPERATION_TYPES)
