"""
Plain ledger records consumed and produced by the balance engine.

These carry no ORM or framework types so the engine can be fed from any
source (querysets, fixtures, JSON) and its output serialized directly.
"""
from dataclasses import dataclass, field
from decimal import Decimal

CENT = Decimal('0.01')


def to_decimal(value):
  """Coerce an int/float/str/Decimal amount to Decimal without float noise."""
  if isinstance(value, Decimal):
    return value
  return Decimal(str(value))


def format_amount(amount):
  return str(to_decimal(amount).quantize(CENT))


@dataclass(frozen=True)
class Member:
  user_id: object
  display_name: str = ''


@dataclass(frozen=True)
class ExpenseSplit:
  expense_id: object
  user_id: object
  amount: Decimal


@dataclass(frozen=True)
class Expense:
  id: object
  payer_id: object
  amount: Decimal
  splits: tuple = ()


@dataclass(frozen=True)
class Settlement:
  payer_id: object
  receiver_id: object
  amount: Decimal


@dataclass(frozen=True)
class Balance:
  """Net position of a member. Positive = is owed, negative = owes."""
  user_id: object
  amount: Decimal
  display_name: str = ''

  def as_dict(self):
    return {
      'user_id': self.user_id,
      'display_name': self.display_name,
      'amount': format_amount(self.amount),
    }


@dataclass(frozen=True)
class SettlementSuggestion:
  from_user_id: object
  to_user_id: object
  amount: Decimal

  def as_dict(self):
    return {
      'from_user_id': self.from_user_id,
      'to_user_id': self.to_user_id,
      'amount': format_amount(self.amount),
    }


@dataclass(frozen=True)
class DebtSimplificationResult:
  transactions: list = field(default_factory=list)
  total_transactions: int = 0
  total_amount_settled: Decimal = Decimal('0')

  def as_dict(self):
    return {
      'transactions': [t.as_dict() for t in self.transactions],
      'total_transactions': self.total_transactions,
      'total_amount_settled': format_amount(self.total_amount_settled),
    }
