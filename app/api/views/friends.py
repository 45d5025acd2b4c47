"""
Friend views — direct balance with another user across shared groups.
"""
import logging
from decimal import Decimal

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from api.models import Group, User
from api.utils.balances import compute_pairwise_balances
from api.utils.ledger_loader import load_expenses, load_settlements
from api.utils.records import format_amount

logger = logging.getLogger('wide_event')


@login_required(login_url='/api/auth/login/')
@require_GET
def friend_list(request):
  """Everyone the requester shares at least one group with."""
  friends = User.objects.filter(
    group_memberships__group__members__user=request.user,
  ).exclude(pk=request.user.pk).distinct().order_by('subname')

  return JsonResponse({'friends': [
    {'user_id': f.pk, 'subname': f.subname, 'display_name': f.label}
    for f in friends
  ]})


@login_required(login_url='/api/auth/login/')
@require_GET
def balance(request, subname):
  """
  Pairwise balance with `subname` in every shared group.

  Positive balances mean the friend owes the requester.
  """
  friend = User.objects.filter(subname=subname).first()
  if not friend:
    return JsonResponse({'error': 'User not found'}, status=404)

  shared = Group.objects.filter(
    members__user=request.user,
  ).filter(
    members__user=friend,
  ).distinct()

  me, them = request.user.pk, friend.pk
  total = Decimal('0')
  groups = []
  for group in shared:
    pairwise = compute_pairwise_balances(load_expenses(group), load_settlements(group))
    amount = pairwise.get((them, me), Decimal('0')) - pairwise.get((me, them), Decimal('0'))
    total += amount
    groups.append({
      'group_id': group.pk,
      'name': group.name,
      'balance': format_amount(amount),
    })

  return JsonResponse({
    'friend': {'user_id': friend.pk, 'subname': friend.subname, 'display_name': friend.label},
    'total_balance': format_amount(total),
    'shared_groups': groups,
  })
