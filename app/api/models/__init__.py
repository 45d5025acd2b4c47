from api.models.activity import Activity
from api.models.expenses import Expense, ExpenseSplit
from api.models.groups import Group, GroupMember
from api.models.settlement import Settlement
from api.models.user import User

__all__ = [
  'Activity',
  'Expense',
  'ExpenseSplit',
  'Group',
  'GroupMember',
  'Settlement',
  'User',
]
