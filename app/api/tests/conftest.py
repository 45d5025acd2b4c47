import json

import pytest

from api.models import Group, GroupMember, User


@pytest.fixture
def alice(db):
  return User.objects.create_user(subname='alice', password='correct-horse', display_name='Alice')


@pytest.fixture
def bob(db):
  return User.objects.create_user(subname='bob', password='correct-horse', display_name='Bob')


@pytest.fixture
def carol(db):
  return User.objects.create_user(subname='carol', password='correct-horse', display_name='Carol')


@pytest.fixture
def trip(alice, bob, carol):
  """A group of three with Alice as admin."""
  group = Group.objects.create(name='Trip to Bali', creator=alice)
  GroupMember.objects.create(group=group, user=alice, role=GroupMember.Role.ADMIN)
  GroupMember.objects.create(group=group, user=bob)
  GroupMember.objects.create(group=group, user=carol)
  return group


@pytest.fixture
def login(client):
  def _login(user):
    client.force_login(user)
    return client
  return _login


@pytest.fixture
def add_expense(login):
  """POST an expense as `user` split across `participants`."""
  def _add(group, user, amount, participants, payer=None, split_type='equally', description='Dinner'):
    client = login(user)
    return client.post(f'/api/expenses/{group.pk}/add/', {
      'description': description,
      'amount': amount,
      'payer_id': (payer or user).pk,
      'split_type': split_type,
      'participants': json.dumps(participants),
    })
  return _add

