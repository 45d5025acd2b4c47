"""
Unit tests for the greedy debt simplifier.
"""
from collections import defaultdict
from decimal import Decimal

from api.utils.debt_simplifier import simplify_debts
from api.utils.records import Balance


def _balances(**amounts):
  return [Balance(user, Decimal(str(amount))) for user, amount in amounts.items()]


def _as_tuples(result):
  return [(t.from_user_id, t.to_user_id, t.amount) for t in result.transactions]


def _apply(balances, result):
  """Net positions after every suggested payment is made."""
  net = defaultdict(Decimal)
  for balance in balances:
    net[balance.user_id] += balance.amount
  for tx in result.transactions:
    net[tx.from_user_id] += tx.amount
    net[tx.to_user_id] -= tx.amount
  return net


def test_single_debtor_single_creditor():
  result = simplify_debts(_balances(a=30, b=0, c=-30))
  assert _as_tuples(result) == [('c', 'a', Decimal('30'))]
  assert result.total_transactions == 1
  assert result.total_amount_settled == Decimal('30')


def test_largest_debtor_pays_largest_creditor_first():
  result = simplify_debts(_balances(a=50, b=30, c=-80))
  assert _as_tuples(result) == [
    ('c', 'a', Decimal('50')),
    ('c', 'b', Decimal('30')),
  ]
  assert result.total_transactions == 2
  assert result.total_amount_settled == Decimal('80')


def test_empty_and_all_zero_inputs():
  for balances in ([], _balances(a=0, b=0, c=0), _balances(a='0.01', b='-0.01')):
    result = simplify_debts(balances)
    assert result.transactions == []
    assert result.total_transactions == 0
    assert result.total_amount_settled == 0


def test_at_most_n_minus_one_transactions():
  balances = _balances(a='45.50', b='12.25', c='-20', d='-7.75', e='-30', f=0)
  result = simplify_debts(balances)
  non_zero = [b for b in balances if b.amount != 0]
  assert result.total_transactions <= len(non_zero) - 1


def test_total_settled_equals_sum_of_credits():
  balances = _balances(a='45.50', b='12.25', c='-20', d='-7.75', e='-30')
  result = simplify_debts(balances)
  assert result.total_amount_settled == Decimal('57.75')
  assert sum(t.amount for t in result.transactions) == result.total_amount_settled


def test_suggestions_zero_every_balance():
  balances = _balances(a='100', b='-33.33', c='-33.33', d='-33.34')
  net = _apply(balances, simplify_debts(balances))
  assert all(abs(amount) <= Decimal('0.01') for amount in net.values())


def test_every_transaction_is_positive_and_debtor_to_creditor():
  balances = _balances(a=10, b=20, c=-5, d=-25)
  creditors = {'a', 'b'}
  for tx in simplify_debts(balances).transactions:
    assert tx.amount > 0
    assert tx.to_user_id in creditors
    assert tx.from_user_id not in creditors


def test_ties_break_by_user_id():
  result = simplify_debts(_balances(zed=10, amy=10, bob=-10, cat=-10))
  assert _as_tuples(result) == [
    ('bob', 'amy', Decimal('10')),
    ('cat', 'zed', Decimal('10')),
  ]


def test_input_order_does_not_change_result():
  forward = _balances(p=15, q=15, r=-15, s=-15)
  assert _as_tuples(simplify_debts(forward)) == _as_tuples(simplify_debts(forward[::-1]))


def test_unbalanced_input_leaves_residue():
  result = simplify_debts(_balances(a=50, b=-20))
  assert _as_tuples(result) == [('b', 'a', Decimal('20'))]
  assert result.total_amount_settled == Decimal('20')


def test_plain_numbers_are_accepted():
  result = simplify_debts([Balance(1, 12.5), Balance(2, -12.5)])
  assert _as_tuples(result) == [(2, 1, Decimal('12.5'))]


def test_as_dict_is_json_ready():
  result = simplify_debts(_balances(a=30, c=-30))
  assert result.as_dict() == {
    'transactions': [{'from_user_id': 'c', 'to_user_id': 'a', 'amount': '30.00'}],
    'total_transactions': 1,
    'total_amount_settled': '30.00',
  }
