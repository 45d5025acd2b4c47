"""
Greedy min-cash-flow debt simplification algorithm.

Given each member's net balance in a group, compute a short list of
payments that would bring every balance to zero.
"""
from decimal import Decimal
import heapq

from api.utils.balances import SETTLED_EPSILON
from api.utils.records import (
  DebtSimplificationResult,
  SettlementSuggestion,
  to_decimal,
)


def _push(heap, magnitude, user_id, seq):
  # Largest magnitude first, then user_id ascending as a stable tie-break.
  heapq.heappush(heap, (-magnitude, str(user_id), seq, user_id))


def simplify_debts(balances):
  """
  Greedy min-cash-flow algorithm to minimize number of transactions.

  Each round the largest debtor pays the largest creditor the smaller of
  the two magnitudes, so every round zeroes at least one side and at most
  n - 1 payments are produced for n non-zero balances.

  Input:
    balances: iterable of objects with `user_id` and `amount`
      Positive = is owed money, Negative = owes money

  Returns:
    DebtSimplificationResult

  Input that does not sum to zero still terminates; the unmatched residue
  is simply left over on one side.
  """
  creditors = []
  debtors = []

  for seq, balance in enumerate(balances):
    amount = to_decimal(balance.amount)
    if amount > SETTLED_EPSILON:
      _push(creditors, amount, balance.user_id, seq)
    elif amount < -SETTLED_EPSILON:
      _push(debtors, -amount, balance.user_id, seq)

  transactions = []
  total = Decimal('0')

  while creditors and debtors:
    credit_neg, _, credit_seq, creditor = heapq.heappop(creditors)
    debt_neg, _, debt_seq, debtor = heapq.heappop(debtors)

    credit = -credit_neg
    debt = -debt_neg
    transfer = min(credit, debt)

    transactions.append(SettlementSuggestion(
      from_user_id=debtor,
      to_user_id=creditor,
      amount=transfer,
    ))
    total += transfer

    remaining_credit = credit - transfer
    remaining_debt = debt - transfer

    if remaining_credit > SETTLED_EPSILON:
      _push(creditors, remaining_credit, creditor, credit_seq)
    if remaining_debt > SETTLED_EPSILON:
      _push(debtors, remaining_debt, debtor, debt_seq)

  return DebtSimplificationResult(
    transactions=transactions,
    total_transactions=len(transactions),
    total_amount_settled=total,
  )
