"""
Settlement views — suggested payments (simplified debts), recording a
payment, and the group's settlement history.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_POST

from api.forms.settlement import SettlementForm
from api.models import Activity, Group, GroupMember, Settlement
from api.utils.activity import record_group_activity
from api.utils.balances import (
  SettlementDirectionError,
  check_settlement,
  compute_balances,
)
from api.utils.debt_simplifier import simplify_debts
from api.utils.ledger_loader import load_group_ledger
from api.utils.membership import resolve_group
from api.utils.records import format_amount

logger = logging.getLogger('wide_event')


def _settlement_as_dict(settlement):
  return {
    'id': settlement.pk,
    'group_id': settlement.group_id,
    'payer_id': settlement.payer_id,
    'receiver_id': settlement.receiver_id,
    'amount': format_amount(settlement.amount),
    'description': settlement.description,
    'settled_at': settlement.settled_at.isoformat(),
  }


@login_required(login_url='/api/auth/login/')
@require_GET
def debts(request, group_id):
  """Compute and return simplified debts for a group (JSON or HTMX partial)."""
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  ledger = load_group_ledger(group)
  balance_list = compute_balances(ledger.members, ledger.expenses, ledger.settlements)
  result = simplify_debts(balance_list)

  # Enrich with display names
  names = {member.user_id: member.display_name for member in ledger.members}
  enriched = []
  for tx in result.transactions:
    enriched.append({
      **tx.as_dict(),
      'from_name': names.get(tx.from_user_id, ''),
      'to_name': names.get(tx.to_user_id, ''),
      'is_payer': tx.from_user_id == request.user.pk,
      'is_payee': tx.to_user_id == request.user.pk,
    })

  request._wide_event['extra']['debt_transactions'] = result.total_transactions

  if request.htmx:
    return render(request, 'partials/debt_summary.html', {
      'debts': enriched,
      'group': group,
      'total_amount_settled': format_amount(result.total_amount_settled),
    })

  return JsonResponse({
    'group_id': group.pk,
    **result.as_dict(),
    'transactions': enriched,
  })


@login_required(login_url='/api/auth/login/')
@require_POST
def record(request, group_id):
  """
  Record a payment from the requester to another member.

  The payment must move both balances toward zero: the requester has to
  currently owe money, the receiver has to currently be owed money, and
  the amount may not exceed what the requester owes.
  """
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  form = SettlementForm(request.POST)
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  receiver_id = form.cleaned_data['receiver_id']
  amount = form.cleaned_data['amount']

  if not GroupMember.objects.filter(group=group, user_id=receiver_id).exists():
    return JsonResponse({'error': 'Both payer and receiver must be members of the group'}, status=400)

  # Concurrent settlements in one group are serialized on the group row.
  with transaction.atomic():
    group = Group.objects.select_for_update().get(pk=group.pk)
    ledger = load_group_ledger(group)
    balance_list = compute_balances(ledger.members, ledger.expenses, ledger.settlements)
    try:
      check_settlement(balance_list, request.user.pk, receiver_id, amount)
    except SettlementDirectionError as e:
      logger.info(f'settlement rejected: group={group.pk} payer={request.user.pk} receiver={receiver_id} reason={e}')
      return JsonResponse({'error': str(e)}, status=400)

    settlement = Settlement.objects.create(
      group=group,
      payer=request.user,
      receiver_id=receiver_id,
      amount=amount,
      description=form.cleaned_data['description'],
    )
    group.save(update_fields=['updated_at'])

  record_group_activity(
    group,
    Activity.ActionType.SETTLEMENT_RECORDED,
    f'{request.user.label} paid {format_amount(amount)}',
    settlement_id=settlement.pk,
    metadata={'receiver_id': receiver_id},
  )

  request._wide_event['extra']['settlement_recorded'] = settlement.pk
  return JsonResponse(_settlement_as_dict(settlement), status=201)


@login_required(login_url='/api/auth/login/')
@require_GET
def settlement_list(request, group_id):
  """Recorded settlements for a group, newest first."""
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  settlements = group.settlements.order_by('-settled_at', '-id')
  return JsonResponse({'settlements': [_settlement_as_dict(s) for s in settlements]})
