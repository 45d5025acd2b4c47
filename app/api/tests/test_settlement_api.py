from unittest import mock

import pytest

from api.models import Group, Settlement
from api.tests.helpers import balances_by_name, equal_participants

pytestmark = pytest.mark.django_db


@pytest.fixture
def dinner(trip, alice, bob, carol, add_expense):
  add_expense(trip, alice, '90', equal_participants(alice, bob, carol))
  return trip


def test_debts_for_equal_split(dinner, alice, bob, carol, login):
  response = login(bob).get(f'/api/settle/{dinner.pk}/debts/')
  assert response.status_code == 200

  body = response.json()
  assert body['total_transactions'] == 2
  assert body['total_amount_settled'] == '60.00'
  by_payer = {t['from_user_id']: t for t in body['transactions']}
  assert set(by_payer) == {bob.pk, carol.pk}
  assert all(t['to_user_id'] == alice.pk and t['amount'] == '30.00' for t in by_payer.values())
  assert by_payer[bob.pk]['is_payer'] is True
  assert by_payer[carol.pk]['is_payer'] is False
  assert by_payer[bob.pk]['to_name'] == 'Alice'


def test_record_settlement_then_debts(dinner, alice, bob, carol, login):
  client = login(bob)
  response = client.post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': alice.pk, 'amount': '30'})
  assert response.status_code == 201

  balances = balances_by_name(client.get(f'/api/groups/{dinner.pk}/balances/'))
  assert balances == {'Alice': '30.00', 'Bob': '0.00', 'Carol': '-30.00'}

  body = client.get(f'/api/settle/{dinner.pk}/debts/').json()
  assert [(t['from_user_id'], t['to_user_id'], t['amount']) for t in body['transactions']] == [
    (carol.pk, alice.pk, '30.00'),
  ]
  assert body['total_transactions'] == 1
  assert body['total_amount_settled'] == '30.00'


def test_reverse_direction_settlement_rejected(dinner, alice, bob, login):
  response = login(alice).post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': bob.pk, 'amount': '10'})
  assert response.status_code == 400
  assert 'does not owe' in response.json()['error']
  assert not Settlement.objects.exists()


def test_overpayment_rejected(dinner, alice, bob, login):
  response = login(bob).post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': alice.pk, 'amount': '45'})
  assert response.status_code == 400
  assert not Settlement.objects.exists()


def test_receiver_must_be_member(dinner, bob, login, db):
  from api.models import User
  outsider = User.objects.create_user(subname='mallory')
  response = login(bob).post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': outsider.pk, 'amount': '5'})
  assert response.status_code == 400


def test_invalid_amount_rejected(dinner, alice, bob, login):
  response = login(bob).post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': alice.pk, 'amount': '-5'})
  assert response.status_code == 400
  assert 'amount' in response.json()['errors']


def test_settlement_list(dinner, alice, bob, login):
  login(bob).post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': alice.pk, 'amount': '12.50'})
  response = login(alice).get(f'/api/settle/{dinner.pk}/list/')
  assert [(s['payer_id'], s['amount']) for s in response.json()['settlements']] == [(bob.pk, '12.50')]


def test_debts_htmx_partial(dinner, bob, login):
  response = login(bob).get(f'/api/settle/{dinner.pk}/debts/', HTTP_HX_REQUEST='true')
  assert response.status_code == 200
  assert b'Bob pays Alice 30.00' in response.content


def test_settled_group_has_no_debts(trip, alice, login):
  body = login(alice).get(f'/api/settle/{trip.pk}/debts/').json()
  assert body['transactions'] == []
  assert body['total_transactions'] == 0
  assert body['total_amount_settled'] == '0.00'


def test_repeated_full_settlement_rejected(dinner, alice, bob, login):
  client = login(bob)
  first = client.post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': alice.pk, 'amount': '30'})
  second = client.post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': alice.pk, 'amount': '30'})

  assert first.status_code == 201
  assert second.status_code == 400
  assert Settlement.objects.filter(group=dinner, payer=bob).count() == 1
  assert balances_by_name(client.get(f'/api/groups/{dinner.pk}/balances/'))['Bob'] == '0.00'


def test_record_locks_group_before_checking(dinner, alice, bob, login):
  with mock.patch.object(Group.objects, 'select_for_update', wraps=Group.objects.select_for_update) as lock:
    response = login(bob).post(f'/api/settle/{dinner.pk}/record/', {'receiver_id': alice.pk, 'amount': '10'})

  assert response.status_code == 201
  lock.assert_called_once_with()
