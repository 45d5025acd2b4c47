import logging

import pytest

from api.models import Group, GroupMember
from api.tests.helpers import equal_participants

pytestmark = pytest.mark.django_db


def test_summary_across_groups(trip, alice, bob, carol, add_expense, login):
  add_expense(trip, alice, '90', equal_participants(alice, bob, carol))

  flat = Group.objects.create(name='Flat', creator=bob)
  GroupMember.objects.create(group=flat, user=bob, role=GroupMember.Role.ADMIN)
  GroupMember.objects.create(group=flat, user=alice)
  add_expense(flat, bob, '100', equal_participants(alice, bob))

  body = login(alice).get('/api/dashboard/summary/').json()
  assert body['net_balance'] == '10.00'
  assert body['total_you_are_owed'] == '10.00'
  assert body['total_owed'] == '0.00'
  assert {g['name']: g['balance'] for g in body['groups']} == {'Trip to Bali': '60.00', 'Flat': '-50.00'}

  body = login(carol).get('/api/dashboard/summary/').json()
  assert body['total_owed'] == '30.00'
  assert body['total_you_are_owed'] == '0.00'


def test_friend_balance_across_shared_groups(trip, alice, bob, carol, add_expense, login):
  add_expense(trip, alice, '90', equal_participants(alice, bob, carol))
  add_expense(trip, bob, '20', equal_participants(alice, bob))

  body = login(alice).get('/api/friends/bob/balance/').json()
  assert body['friend']['subname'] == 'bob'
  assert body['total_balance'] == '20.00'
  assert body['shared_groups'][0]['balance'] == '20.00'

  body = login(bob).get('/api/friends/alice/balance/').json()
  assert body['total_balance'] == '-20.00'


def test_friend_balance_unknown_user(login, alice):
  assert login(alice).get('/api/friends/nobody/balance/').status_code == 404


def test_friend_list(trip, alice, login):
  body = login(alice).get('/api/friends/').json()
  assert [f['subname'] for f in body['friends']] == ['bob', 'carol']


def test_activity_feed_paginates(trip, alice, bob, add_expense, login):
  for n in range(21):
    add_expense(trip, alice, '2', equal_participants(alice, bob), description=f'Snack {n}')

  client = login(bob)
  first = client.get('/api/activity/load-more/').json()
  assert len(first['activities']) == 20
  assert first['has_more'] is True
  assert first['activities'][0]['message'].endswith('"Snack 20" (2.00)')

  second = client.get('/api/activity/load-more/', {'page': first['next_page']}).json()
  assert len(second['activities']) == 1
  assert second['has_more'] is False
  assert second['next_page'] is None


def test_wide_event_logged_per_request(trip, alice, login, caplog):
  # wide_event does not propagate to the root logger caplog listens on
  wide_event = logging.getLogger('wide_event')
  wide_event.addHandler(caplog.handler)
  try:
    with caplog.at_level(logging.INFO, logger='wide_event'):
      login(alice).get(f'/api/groups/{trip.pk}/balances/')
  finally:
    wide_event.removeHandler(caplog.handler)

  events = [r.getMessage() for r in caplog.records if r.name == 'wide_event']
  assert any('"balance_members": 3' in e and '"user": "alice"' in e for e in events)
