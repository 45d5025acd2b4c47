"""
Load a group's ledger from the database as plain records.

Views pass the result straight into the balance engine; the engine itself
never touches the ORM.
"""
from dataclasses import dataclass

from django.db.models import Prefetch

from api.models import ExpenseSplit as SplitRow
from api.models import GroupMember
from api.utils.records import Expense, ExpenseSplit, Member, Settlement


@dataclass(frozen=True)
class GroupLedger:
  members: list
  expenses: list
  settlements: list


def load_members(group):
  rows = GroupMember.objects.filter(group=group).select_related('user')
  return [Member(user_id=row.user_id, display_name=row.user.label) for row in rows]


def load_expenses(group):
  rows = group.expenses.prefetch_related(
    Prefetch('splits', queryset=SplitRow.objects.order_by('id')),
  ).order_by('created_at', 'id')
  return [
    Expense(
      id=row.pk,
      payer_id=row.payer_id,
      amount=row.amount,
      splits=tuple(
        ExpenseSplit(expense_id=row.pk, user_id=split.user_id, amount=split.amount)
        for split in row.splits.all()
      ),
    )
    for row in rows
  ]


def load_settlements(group):
  rows = group.settlements.order_by('settled_at', 'id')
  return [
    Settlement(payer_id=row.payer_id, receiver_id=row.receiver_id, amount=row.amount)
    for row in rows
  ]


def load_group_ledger(group):
  return GroupLedger(
    members=load_members(group),
    expenses=load_expenses(group),
    settlements=load_settlements(group),
  )
