"""Tests for membership reconciliation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from itertools import combinations

import pytest

from domain_controller.directory import (
    AttributeModification,
    DirectoryEntry,
    ModificationType,
)
from domain_controller.membership import (
    MembershipDelta,
    MembershipReconciler,
    MembershipUpdateError,
    build_member_modifications,
    reconcile,
)
from domain_controller.membership.reconciler import align_dns
from tests.fakes import GROUP_BASE_DN, USER_BASE_DN, FakeDirectoryClient

_DNS = ["cn=a,dc=x", "cn=b,dc=x", "cn=c,dc=x", "cn=d,dc=x"]
_SUBSETS = [
    frozenset(subset)
    for size in range(len(_DNS) + 1)
    for subset in combinations(_DNS, size)
]


@pytest.mark.parametrize("current", _SUBSETS)
@pytest.mark.parametrize("desired", _SUBSETS)
def test_reconcile_properties(
    current: frozenset[str],
    desired: frozenset[str],
) -> None:
    """Test delta is minimal and reaches the desired set."""
    delta = reconcile(current, desired)

    assert delta.kept == current & desired
    assert not delta.to_add & delta.to_remove
    assert (current - delta.to_remove) | delta.to_add == desired
    assert delta.to_remove <= current
    assert not delta.to_add & current


def test_reconcile_same_sets_is_empty() -> None:
    delta = reconcile(_DNS, reversed(_DNS))
    assert delta.is_empty
    assert delta.kept == frozenset(_DNS)


def test_reconcile_example() -> None:
    """Test kept, removed and added DNs."""
    delta = reconcile(["cn=a,dc=x", "cn=b,dc=x"], ["cn=b,dc=x", "cn=c,dc=x"])

    assert delta == MembershipDelta(
        kept=frozenset({"cn=b,dc=x"}),
        to_remove=frozenset({"cn=a,dc=x"}),
        to_add=frozenset({"cn=c,dc=x"}),
    )


def test_align_dns_uses_stored_spelling() -> None:
    aligned = align_dns(["CN=Alice,DC=x"], ["cn=alice,dc=x", "cn=bob,dc=x"])
    assert aligned == frozenset({"CN=Alice,DC=x", "cn=bob,dc=x"})


def test_align_dns_collapses_case_duplicates() -> None:
    """Test desired DNs equal up to case yield one value."""
    aligned = align_dns([], ["cn=Bob,dc=x", "CN=BOB,DC=X", "cn=carol,dc=x"])

    assert aligned == frozenset({"cn=Bob,dc=x", "cn=carol,dc=x"})
    assert reconcile([], aligned).to_add == aligned


def test_modifications_create_absent_attribute() -> None:
    """Test absent attribute is created with a single REPLACE."""
    entry = DirectoryEntry.create("cn=g,dc=x", {})
    delta = reconcile([], ["cn=b,dc=x", "cn=a,dc=x"])

    changes = build_member_modifications(entry, "member", delta)

    assert changes == [
        AttributeModification(
            ModificationType.REPLACE,
            "member",
            ("cn=a,dc=x", "cn=b,dc=x"),
        ),
    ]


def test_modifications_absent_attribute_nothing_to_add() -> None:
    entry = DirectoryEntry.create("cn=g,dc=x", {})
    assert build_member_modifications(entry, "member", reconcile([], [])) == []


@pytest.mark.parametrize("current", _SUBSETS[1:])
@pytest.mark.parametrize("desired", _SUBSETS)
def test_modifications_one_item_per_dn(
    current: frozenset[str],
    desired: frozenset[str],
) -> None:
    """Test existing attribute gets one REMOVE/ADD item per DN."""
    entry = DirectoryEntry.create("cn=g,dc=x", {"member": current})
    delta = reconcile(current, desired)

    changes = build_member_modifications(entry, "member", delta)

    removed = [c for c in changes if c.operation == ModificationType.REMOVE]
    added = [c for c in changes if c.operation == ModificationType.ADD]
    assert len(changes) == len(delta.to_remove) + len(delta.to_add)
    assert {c.values[0] for c in removed} == delta.to_remove
    assert {c.values[0] for c in added} == delta.to_add
    assert all(len(c.values) == 1 for c in changes)


@pytest.mark.asyncio
async def test_update_members_single_modify(
    directory: FakeDirectoryClient,
) -> None:
    """Test group members are reconciled in one modify request."""
    connection = directory.connection
    group_dn = f"cn=admins,{GROUP_BASE_DN}"
    alice = f"cn=alice,{USER_BASE_DN}"
    bob = f"cn=bob,{USER_BASE_DN}"
    entry = connection.get(group_dn)

    delta = await MembershipReconciler().update_members(
        connection,  # type: ignore
        entry,
        "member",
        [bob],
    )

    assert delta.to_remove == {alice}
    assert delta.to_add == {bob}
    assert len(connection.modify_calls) == 1
    assert connection.entries[group_dn]["member"] == {bob}


@pytest.mark.asyncio
async def test_update_members_no_change_no_modify(
    directory: FakeDirectoryClient,
) -> None:
    connection = directory.connection
    group_dn = f"cn=admins,{GROUP_BASE_DN}"
    entry = connection.get(group_dn)

    delta = await MembershipReconciler().update_members(
        connection,  # type: ignore
        entry,
        "member",
        [f"CN=Alice,{USER_BASE_DN}"],
    )

    assert delta.is_empty
    assert connection.modify_calls == []


@pytest.mark.asyncio
async def test_update_members_case_duplicates_added_once(
    directory: FakeDirectoryClient,
) -> None:
    connection = directory.connection
    group_dn = f"cn=staff,{GROUP_BASE_DN}"
    bob = f"cn=bob,{USER_BASE_DN}"
    entry = connection.get(group_dn)

    delta = await MembershipReconciler().update_members(
        connection,  # type: ignore
        entry,
        "member",
        [bob, bob.upper()],
    )

    assert delta.to_add == {bob}
    [(dn, changes)] = connection.modify_calls
    assert dn == group_dn
    assert [change.values for change in changes] == [(bob,)]


@pytest.mark.asyncio
async def test_update_members_failure(
    directory: FakeDirectoryClient,
) -> None:
    """Test modify failure is wrapped with entry DN and attribute."""
    connection = directory.connection
    group_dn = f"cn=staff,{GROUP_BASE_DN}"
    connection.failing_dns.add(group_dn)
    entry = connection.get(group_dn)

    with pytest.raises(MembershipUpdateError) as exc_info:
        await MembershipReconciler().update_members(
            connection,  # type: ignore
            entry,
            "member",
            [f"cn=bob,{USER_BASE_DN}"],
        )

    assert exc_info.value.context == {"dn": group_dn, "attribute": "member"}
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_update_back_references_writes_groups(
    directory: FakeDirectoryClient,
) -> None:
    """Test user groups are changed on the group side only."""
    connection = directory.connection
    alice = f"cn=alice,{USER_BASE_DN}"
    admins = f"cn=admins,{GROUP_BASE_DN}"
    staff = f"cn=staff,{GROUP_BASE_DN}"
    entry = connection.get(alice)

    await MembershipReconciler().update_back_references(
        connection,  # type: ignore
        entry,
        "memberOf",
        "member",
        [staff],
    )

    assert [dn for dn, _ in connection.modify_calls] == [admins, staff]
    for dn, changes in connection.modify_calls:
        assert dn != alice
        assert [c.attribute for c in changes] == ["member"]
        assert changes[0].values == (alice,)
    assert connection.entries[alice]["memberOf"] == {staff}


@pytest.mark.asyncio
async def test_update_back_references_aborts_on_failure(
    directory: FakeDirectoryClient,
) -> None:
    """Test first failing group stops the remaining modifications."""
    connection = directory.connection
    alice = f"cn=alice,{USER_BASE_DN}"
    admins = f"cn=admins,{GROUP_BASE_DN}"
    connection.failing_dns.add(admins)
    entry = connection.get(alice)

    with pytest.raises(MembershipUpdateError) as exc_info:
        await MembershipReconciler().update_back_references(
            connection,  # type: ignore
            entry,
            "memberOf",
            "member",
            [f"cn=staff,{GROUP_BASE_DN}"],
        )

    assert exc_info.value.context["dn"] == admins
    assert len(connection.modify_calls) == 1
