"""
Balance aggregation over a group's expenses and settlements.

Everything here is pure: callers hand in fully-materialized records for a
single group and get plain records back. Nothing is fetched or persisted.
"""
from collections import defaultdict
from decimal import Decimal

from api.utils.records import Balance, to_decimal

# Magnitudes at or below one cent count as settled.
SETTLED_EPSILON = Decimal('0.01')


class SettlementDirectionError(ValueError):
  """Raised when a proposed settlement does not reduce an existing debt."""
  pass


def compute_balances(members, expenses, settlements):
  """
  Compute each member's net balance within a group.

  The payer of an expense is credited the full amount and every split
  participant is debited their share, so a payer who also holds a split
  nets their own share out. A settlement credits the payer and debits the
  receiver.

  References to users that are not in `members` are skipped rather than
  raised on, which means conservation (balances summing to zero) only
  holds when every referenced user is a member.

  Returns:
    list[Balance] — one per member, in the order of `members`
  """
  totals = {member.user_id: Decimal('0') for member in members}

  for expense in expenses:
    if expense.payer_id in totals:
      totals[expense.payer_id] += to_decimal(expense.amount)
    for split in expense.splits:
      if split.user_id in totals:
        totals[split.user_id] -= to_decimal(split.amount)

  for settlement in settlements:
    amount = to_decimal(settlement.amount)
    if settlement.payer_id in totals:
      totals[settlement.payer_id] += amount
    if settlement.receiver_id in totals:
      totals[settlement.receiver_id] -= amount

  return [
    Balance(
      user_id=member.user_id,
      amount=totals[member.user_id],
      display_name=member.display_name,
    )
    for member in members
  ]


def balance_for(balances, user_id):
  """Return `user_id`'s amount from a balance list, or zero if absent."""
  for balance in balances:
    if balance.user_id == user_id:
      return balance.amount
  return Decimal('0')


def compute_pairwise_balances(expenses, settlements=()):
  """
  Net direct debts between each pair of users.

  Returns:
    dict[(debtor_id, creditor_id), Decimal] — at most one direction per
    pair, with settled pairs (<= one cent) dropped
  """
  owed = defaultdict(Decimal)

  def _add_debt(debtor, creditor, amount):
    reverse = owed.get((creditor, debtor), Decimal('0'))
    if reverse >= amount:
      owed[(creditor, debtor)] = reverse - amount
    else:
      owed[(creditor, debtor)] = Decimal('0')
      owed[(debtor, creditor)] += amount - reverse

  for expense in expenses:
    for split in expense.splits:
      if split.user_id == expense.payer_id:
        continue
      _add_debt(split.user_id, expense.payer_id, to_decimal(split.amount))

  # Paying someone is equivalent to them now owing you that amount back.
  for settlement in settlements:
    if settlement.payer_id == settlement.receiver_id:
      continue
    _add_debt(settlement.receiver_id, settlement.payer_id, to_decimal(settlement.amount))

  return {
    pair: amount
    for pair, amount in owed.items()
    if abs(amount) > SETTLED_EPSILON
  }


def check_settlement(balances, payer_id, receiver_id, amount):
  """
  Validate that a settlement from `payer_id` to `receiver_id` moves both
  balances toward zero.

  compute_balances accepts any recorded settlement as asserted; this check
  is run before a settlement is persisted so a payment recorded in the
  wrong direction cannot push balances further apart.

  Raises:
    SettlementDirectionError: with a user-facing message
  """
  amount = to_decimal(amount)
  if payer_id == receiver_id:
    raise SettlementDirectionError('Cannot settle with yourself.')

  known = {balance.user_id: balance.amount for balance in balances}
  if payer_id not in known or receiver_id not in known:
    raise SettlementDirectionError('Both payer and receiver must be members of the group.')

  payer_balance = known[payer_id]
  receiver_balance = known[receiver_id]

  if payer_balance >= -SETTLED_EPSILON:
    raise SettlementDirectionError('Payer does not owe anything in this group.')
  if receiver_balance <= SETTLED_EPSILON:
    raise SettlementDirectionError('Receiver is not owed anything in this group.')
  if amount - (-payer_balance) > SETTLED_EPSILON:
    raise SettlementDirectionError(
      f'Settlement of {amount} exceeds the outstanding debt of {-payer_balance}.'
    )
