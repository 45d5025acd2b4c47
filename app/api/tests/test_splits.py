from decimal import Decimal

import pytest

from api.utils.splits import SplitError, build_splits


def test_equal_split_assigns_remainder_to_first_participant():
  splits = build_splits(Decimal('100'), 'equally', [{'user_id': 1}, {'user_id': 2}, {'user_id': 3}])
  assert splits == [(1, Decimal('33.34')), (2, Decimal('33.33')), (3, Decimal('33.33'))]
  assert sum(amount for _, amount in splits) == Decimal('100')


def test_equal_split_even_amount():
  splits = build_splits('90', 'equally', [{'user_id': 'a'}, {'user_id': 'b'}, {'user_id': 'c'}])
  assert [amount for _, amount in splits] == [Decimal('30.00')] * 3


def test_percentage_split():
  participants = [
    {'user_id': 1, 'percentage': 50},
    {'user_id': 2, 'percentage': '33.3'},
    {'user_id': 3, 'percentage': Decimal('16.7')},
  ]
  splits = build_splits(Decimal('10.00'), 'percentage', participants)
  assert splits == [(1, Decimal('5.00')), (2, Decimal('3.33')), (3, Decimal('1.67'))]


def test_percentage_rounding_remainder_lands_on_first():
  participants = [{'user_id': u, 'percentage': '33.33'} for u in (1, 2)]
  participants.append({'user_id': 3, 'percentage': '33.34'})
  splits = build_splits(Decimal('0.10'), 'percentage', participants)
  assert sum(amount for _, amount in splits) == Decimal('0.10')


def test_percentages_must_total_one_hundred():
  with pytest.raises(SplitError, match='add up to 100'):
    build_splits(Decimal('10'), 'percentage', [{'user_id': 1, 'percentage': 60}, {'user_id': 2, 'percentage': 30}])


@pytest.mark.parametrize('amount, split_type, participants', [
  (Decimal('10'), 'equally', []),
  (Decimal('0'), 'equally', [{'user_id': 1}]),
  (Decimal('10'), 'shares', [{'user_id': 1}]),
  (Decimal('10'), 'percentage', [{'user_id': 1, 'percentage': 110}, {'user_id': 2, 'percentage': -10}]),
])
def test_invalid_input_raises(amount, split_type, participants):
  with pytest.raises(SplitError):
    build_splits(amount, split_type, participants)


@pytest.mark.parametrize('percentage', [float('nan'), 'NaN', 'Infinity'])
def test_non_finite_percentage_raises_split_error(percentage):
  with pytest.raises(SplitError, match='finite'):
    build_splits('10', 'percentage', [{'user_id': 1, 'percentage': percentage}])


def test_non_finite_amount_raises_split_error():
  with pytest.raises(SplitError):
    build_splits('NaN', 'equally', [{'user_id': 1}])
