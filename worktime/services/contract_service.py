# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Effective-dated contract resolution."""

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import date

from worktime.exceptions import DataIntegrityError
from worktime.schemas import ContractDetails, Employee

logger = logging.getLogger(__name__)


def resolve_contract(
    contract_history: Sequence[ContractDetails],
    on_date: date,
    employee_id: int | None = None,
) -> ContractDetails:
    """Find the contract in effect on a date.

    The record with the latest ``valid_from`` on or before ``on_date`` wins.
    Records sharing a ``valid_from`` are resolved in favor of the one that
    appears later in the history. Dates before the first record fall back to
    the oldest record.

    Args:
        contract_history: Unordered contract records.
        on_date: The date to resolve for.
        employee_id: Used in log and error messages.

    Returns:
        The contract in effect.

    Raises:
        DataIntegrityError: If the history is empty.
    """
    if not contract_history:
        logger.error(f"Employee {employee_id} has no contract history")
        raise DataIntegrityError(employee_id, "contract history is empty")

    # sorted() is stable, so the reversed input puts later duplicates first
    ordered = sorted(
        reversed(contract_history), key=lambda c: c.valid_from, reverse=True
    )

    for contract in ordered:
        if contract.valid_from <= on_date:
            return contract

    oldest = ordered[-1]
    logger.debug(
        f"Employee {employee_id}: no contract valid on {on_date}, "
        f"falling back to contract from {oldest.valid_from}"
    )
    return oldest


def contract_for(employee: Employee, on_date: date) -> ContractDetails:
    """Resolve the employee's contract in effect on a date."""
    return resolve_contract(employee.contract_history, on_date, employee.id)


def ensure_contract_history(employee: Employee) -> None:
    """Raise if the employee has no contract to compute against."""
    if not employee.contract_history:
        logger.error(f"Employee {employee.id} has no contract history")
        raise DataIntegrityError(employee.id, "contract history is empty")


def validate_contract_history(employee: Employee) -> None:
    """Validate a contract history before it is stored.

    Args:
        employee: The employee whose history to check.

    Raises:
        DataIntegrityError: If the history is empty or two records share
            a ``valid_from`` date.
    """
    ensure_contract_history(employee)

    counts = Counter(c.valid_from for c in employee.contract_history)
    duplicates = sorted(d for d, n in counts.items() if n > 1)
    if duplicates:
        listed = ", ".join(d.isoformat() for d in duplicates)
        raise DataIntegrityError(
            employee.id, f"duplicate contract valid_from dates: {listed}"
        )
