from django.urls import path

from api.views import activity as activity_views
from api.views import auth as auth_views
from api.views import dashboard as dashboard_views
from api.views import expenses as expenses_views
from api.views import friends as friends_views
from api.views import groups as groups_views
from api.views import settlement as settlement_views

app_name = 'api'

urlpatterns = [
  # Auth
  path('auth/signup/', auth_views.signup_view, name='signup'),
  path('auth/login/', auth_views.login_view, name='login'),
  path('auth/logout/', auth_views.logout_view, name='logout'),

  # Groups
  path('groups/', groups_views.group_list, name='groups-list'),
  path('groups/create/', groups_views.create, name='groups-create'),
  path('groups/<int:group_id>/update/', groups_views.update, name='groups-update'),
  path('groups/<int:group_id>/delete/', groups_views.delete, name='groups-delete'),
  path('groups/<int:group_id>/members/', groups_views.members, name='groups-members'),
  path('groups/<int:group_id>/members/add/', groups_views.add_member, name='groups-add-member'),
  path(
    'groups/<int:group_id>/members/<int:user_id>/remove/',
    groups_views.remove_member,
    name='groups-remove-member',
  ),
  path('groups/<int:group_id>/leave/', groups_views.leave, name='groups-leave'),
  path('groups/<int:group_id>/balances/', groups_views.balances, name='groups-balances'),

  # Expenses
  path('expenses/<int:group_id>/add/', expenses_views.add, name='expenses-add'),
  path('expenses/<int:group_id>/list/', expenses_views.expense_list, name='expenses-list'),
  path('expenses/<int:expense_id>/update/', expenses_views.update, name='expenses-update'),
  path('expenses/<int:expense_id>/delete/', expenses_views.delete, name='expenses-delete'),

  # Settlement
  path('settle/<int:group_id>/debts/', settlement_views.debts, name='settle-debts'),
  path('settle/<int:group_id>/record/', settlement_views.record, name='settle-record'),
  path('settle/<int:group_id>/list/', settlement_views.settlement_list, name='settle-list'),

  # Dashboard
  path('dashboard/summary/', dashboard_views.summary, name='dashboard-summary'),

  # Friends
  path('friends/', friends_views.friend_list, name='friends-list'),
  path('friends/<str:subname>/balance/', friends_views.balance, name='friends-balance'),

  # Activity
  path('activity/load-more/', activity_views.load_more, name='activity-load-more'),
]
