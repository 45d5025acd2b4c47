"""
Dashboard views — the requester's position across every group they are in.
"""
import logging
from decimal import Decimal

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from api.models import Group
from api.utils.balances import balance_for, compute_balances
from api.utils.ledger_loader import load_group_ledger
from api.utils.records import format_amount

logger = logging.getLogger('wide_event')


@login_required(login_url='/api/auth/login/')
@require_GET
def summary(request):
  """
  Net balance across all of the requester's groups.

  `total_owed` is what the requester owes overall and `total_you_are_owed`
  what others owe them; at most one of the two is non-zero.
  """
  net = Decimal('0')
  per_group = []

  for group in Group.objects.filter(members__user=request.user).distinct():
    ledger = load_group_ledger(group)
    balances = compute_balances(ledger.members, ledger.expenses, ledger.settlements)
    amount = balance_for(balances, request.user.pk)
    net += amount
    per_group.append({
      'group_id': group.pk,
      'name': group.name,
      'balance': format_amount(amount),
    })

  request._wide_event['extra']['dashboard_groups'] = len(per_group)

  return JsonResponse({
    'total_owed': format_amount(-net if net < 0 else 0),
    'total_you_are_owed': format_amount(net if net > 0 else 0),
    'net_balance': format_amount(net),
    'groups': per_group,
  })
