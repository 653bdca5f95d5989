"""Membership reconciliation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Iterable

from domain_controller.directory import (
    AttributeModification,
    DirectoryConnection,
    DirectoryEntry,
    DirectoryError,
    ModificationType,
)

from .exceptions import MembershipUpdateError
from .utils import log


@dataclass(frozen=True)
class MembershipDelta:
    """Minimal change between current and desired DN sets."""

    kept: frozenset[str]
    to_remove: frozenset[str]
    to_add: frozenset[str]

    @property
    def is_empty(self) -> bool:
        return not self.to_remove and not self.to_add


def reconcile(
    current: Iterable[str],
    desired: Iterable[str],
) -> MembershipDelta:
    """Compute minimal delta under set semantics.

    No DN is removed and then added again: ``to_add`` and ``to_remove``
    are disjoint and applying them to ``current`` yields ``desired``.
    """
    current_set = frozenset(current)
    desired_set = frozenset(desired)
    kept = current_set & desired_set
    return MembershipDelta(
        kept=kept,
        to_remove=current_set - kept,
        to_add=desired_set - kept,
    )


def align_dns(
    current: Iterable[str],
    desired: Iterable[str],
) -> frozenset[str]:
    """Spell desired DNs the way the directory stores them.

    DN comparison in the directory is case-insensitive, so a desired DN
    differing from a stored one only by case refers to the same entry.
    Desired DNs equal up to case collapse to the first spelling.
    """
    desired = list(desired)
    aligned = {dn.casefold(): dn for dn in current}
    for dn in desired:
        aligned.setdefault(dn.casefold(), dn)

    wanted = {dn.casefold() for dn in desired}
    return frozenset(
        dn for folded, dn in aligned.items() if folded in wanted
    )


def build_member_modifications(
    entry: DirectoryEntry,
    attribute: str,
    delta: MembershipDelta,
) -> list[AttributeModification]:
    """Build modify items for a multi-valued DN attribute of entry.

    When the entry holds no value of the attribute yet, the attribute is
    created with a single REPLACE item instead of appended to.
    """
    if not entry.has_attribute(attribute):
        if not delta.to_add:
            return []
        return [
            AttributeModification(
                operation=ModificationType.REPLACE,
                attribute=attribute,
                values=tuple(sorted(delta.to_add)),
            ),
        ]

    changes = [
        AttributeModification(ModificationType.REMOVE, attribute, (dn,))
        for dn in sorted(delta.to_remove)
    ]
    changes.extend(
        AttributeModification(ModificationType.ADD, attribute, (dn,))
        for dn in sorted(delta.to_add)
    )
    return changes


class MembershipReconciler:
    """Apply membership deltas through a directory connection."""

    async def update_members(
        self,
        connection: DirectoryConnection,
        entry: DirectoryEntry,
        attribute: str,
        desired: Iterable[str],
    ) -> MembershipDelta:
        """Reconcile a multi-valued DN attribute in one modify request.

        :param DirectoryConnection connection: bound connection
        :param DirectoryEntry entry: entry snapshot owning the attribute
        :param str attribute: member attribute name
        :param Iterable[str] desired: desired DNs
        :raises MembershipUpdateError: modify failed
        :return MembershipDelta: applied delta
        """
        current = entry.get_values(attribute)
        delta = reconcile(current, align_dns(current, desired))
        self._log_delta(entry.dn, attribute, delta)

        changes = build_member_modifications(entry, attribute, delta)
        if not changes:
            return delta

        try:
            await connection.modify(entry.dn, changes)
        except DirectoryError as err:
            raise MembershipUpdateError(
                "Membership update failed",
                dn=entry.dn,
                attribute=attribute,
            ) from err

        return delta

    async def update_back_references(
        self,
        connection: DirectoryConnection,
        entry: DirectoryEntry,
        back_reference_attribute: str,
        member_attribute: str,
        desired: Iterable[str],
    ) -> MembershipDelta:
        """Reconcile a computed back-reference by writing the other side.

        The back-reference attribute of ``entry`` (e.g. ``memberOf``) is
        never written. Each affected target entry gets its own modify
        request adding or removing ``entry.dn`` on ``member_attribute``.

        :raises MembershipUpdateError: first failed modify, the rest
            are not attempted
        """
        current = entry.get_values(back_reference_attribute)
        delta = reconcile(current, align_dns(current, desired))
        self._log_delta(entry.dn, back_reference_attribute, delta)

        pending = [
            (target_dn, ModificationType.REMOVE)
            for target_dn in sorted(delta.to_remove)
        ]
        pending.extend(
            (target_dn, ModificationType.ADD)
            for target_dn in sorted(delta.to_add)
        )

        for target_dn, operation in pending:
            change = AttributeModification(
                operation=operation,
                attribute=member_attribute,
                values=(entry.dn,),
            )
            try:
                await connection.modify(target_dn, [change])
            except DirectoryError as err:
                raise MembershipUpdateError(
                    "Membership update failed",
                    dn=target_dn,
                    attribute=member_attribute,
                ) from err

        return delta

    @staticmethod
    def _log_delta(dn: str, attribute: str, delta: MembershipDelta) -> None:
        log.debug(f"{dn} {attribute} kept: {sorted(delta.kept)}")
        log.debug(f"{dn} {attribute} removed: {sorted(delta.to_remove)}")
        log.debug(f"{dn} {attribute} added: {sorted(delta.to_add)}")
