"""
Split generation for new and edited expenses.

Turns an expense total plus a split rule into per-user amounts rounded to
the cent. The splits always sum exactly to the total; any rounding
remainder lands on the first participant.
"""
from decimal import ROUND_HALF_UP, Decimal

from api.utils.records import CENT, to_decimal

EQUALLY = 'equally'
PERCENTAGE = 'percentage'
SPLIT_TYPES = (EQUALLY, PERCENTAGE)

HUNDRED = Decimal('100')


class SplitError(ValueError):
  """Raised when a split rule cannot be applied to an expense."""
  pass


def _round(amount):
  return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def build_splits(amount, split_type, participants):
  """
  Build (user_id, amount) pairs for an expense.

  Args:
    amount: expense total
    split_type: 'equally' | 'percentage'
    participants: list of dicts with 'user_id' and, for percentage
      splits, 'percentage' (0-100)

  Returns:
    list[tuple[user_id, Decimal]] in participant order

  Raises:
    SplitError
  """
  amount = to_decimal(amount)
  if not amount.is_finite() or amount <= 0:
    raise SplitError('Amount must be positive.')
  if not participants:
    raise SplitError('At least one participant must be selected.')

  if split_type == EQUALLY:
    share = _round(amount / len(participants))
    splits = [(p['user_id'], share) for p in participants]

  elif split_type == PERCENTAGE:
    percentages = [to_decimal(p.get('percentage') or 0) for p in participants]
    if not all(pct.is_finite() for pct in percentages):
      raise SplitError('Percentages must be finite numbers.')
    if any(pct < 0 for pct in percentages):
      raise SplitError('Percentages cannot be negative.')
    if abs(sum(percentages) - HUNDRED) >= CENT:
      raise SplitError('Percentages for selected members must add up to 100.')
    splits = [
      (p['user_id'], _round(amount * pct / HUNDRED))
      for p, pct in zip(participants, percentages)
    ]

  else:
    raise SplitError(f'Unknown split type: {split_type}')

  remainder = amount - sum(share for _, share in splits)
  if remainder:
    first_user, first_share = splits[0]
    splits[0] = (first_user, first_share + remainder)

  return splits
