"""
Expense views — add, list, edit and delete expenses within a group.

Splits are generated from the submitted split rule and always sum to the
expense amount. Edits replace the expense and all of its splits in one
transaction.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from api.forms.expenses import ExpenseForm
from api.models import Activity, Expense, ExpenseSplit, GroupMember
from api.utils.activity import record_group_activity
from api.utils.membership import resolve_group
from api.utils.records import format_amount

logger = logging.getLogger('wide_event')


def _expense_as_dict(expense):
  return {
    'id': expense.pk,
    'group_id': expense.group_id,
    'payer_id': expense.payer_id,
    'description': expense.description,
    'amount': format_amount(expense.amount),
    'category': expense.category,
    'split_type': expense.split_type,
    'date': expense.date.isoformat(),
    'splits': [
      {
        'user_id': split.user_id,
        'amount': format_amount(split.amount),
        'percentage': None if split.percentage is None else str(split.percentage),
      }
      for split in expense.splits.all()
    ],
  }


def _member_ids(group):
  return GroupMember.objects.filter(group=group).values_list('user_id', flat=True)


def _write_splits(expense, cleaned):
  percentages = cleaned.get('percentages', {})
  ExpenseSplit.objects.bulk_create([
    ExpenseSplit(
      expense=expense,
      user_id=user_id,
      amount=amount,
      percentage=percentages.get(user_id),
    )
    for user_id, amount in cleaned['splits']
  ])


@login_required(login_url='/api/auth/login/')
@require_POST
def add(request, group_id):
  """Add an expense to a group."""
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  form = ExpenseForm(request.POST, member_ids=_member_ids(group))
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  data = form.cleaned_data
  with transaction.atomic():
    expense = Expense.objects.create(
      group=group,
      payer_id=data['payer_id'],
      description=data['description'],
      amount=data['amount'],
      category=data['category'],
      split_type=data['split_type'],
    )
    _write_splits(expense, data)
    group.save(update_fields=['updated_at'])

  record_group_activity(
    group,
    Activity.ActionType.EXPENSE_ADDED,
    f'{request.user.label} added "{expense.description}" ({format_amount(expense.amount)})',
    expense_id=expense.pk,
  )

  request._wide_event['extra']['expense_added'] = expense.pk
  return JsonResponse(_expense_as_dict(expense), status=201)


@login_required(login_url='/api/auth/login/')
@require_GET
def expense_list(request, group_id):
  """List expenses for a group, newest first."""
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  expenses = group.expenses.prefetch_related('splits').order_by('-created_at', '-id')
  return JsonResponse({'expenses': [_expense_as_dict(e) for e in expenses]})


def _editable_expense(request, expense_id):
  """Return (expense, error_response); payers and group admins may edit."""
  expense = Expense.objects.filter(pk=expense_id).select_related('group').first()
  if not expense:
    return None, JsonResponse({'error': 'Expense not found'}, status=404)

  _, membership, error = resolve_group(request, expense.group_id)
  if error:
    return None, error

  if expense.payer_id != request.user.pk and membership.role != GroupMember.Role.ADMIN:
    return None, JsonResponse({'error': 'Only the payer or a group admin can change this expense'}, status=403)

  return expense, None


@login_required(login_url='/api/auth/login/')
@require_POST
def update(request, expense_id):
  """Replace an expense's description, amount, payer and splits wholesale."""
  expense, error = _editable_expense(request, expense_id)
  if error:
    return error

  form = ExpenseForm(request.POST, member_ids=_member_ids(expense.group))
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  data = form.cleaned_data
  with transaction.atomic():
    expense.splits.all().delete()
    expense.payer_id = data['payer_id']
    expense.description = data['description']
    expense.amount = data['amount']
    expense.category = data['category']
    expense.split_type = data['split_type']
    expense.save()
    _write_splits(expense, data)

  record_group_activity(
    expense.group,
    Activity.ActionType.EXPENSE_UPDATED,
    f'{request.user.label} updated "{expense.description}" ({format_amount(expense.amount)})',
    expense_id=expense.pk,
  )

  request._wide_event['extra']['expense_updated'] = expense.pk
  return JsonResponse(_expense_as_dict(expense))


@login_required(login_url='/api/auth/login/')
@require_POST
def delete(request, expense_id):
  """Delete an expense and its splits."""
  expense, error = _editable_expense(request, expense_id)
  if error:
    return error

  group = expense.group
  description = expense.description
  expense_pk = expense.pk
  expense.delete()

  record_group_activity(
    group,
    Activity.ActionType.EXPENSE_DELETED,
    f'{request.user.label} deleted "{description}"',
    expense_id=expense_pk,
  )

  request._wide_event['extra']['expense_deleted'] = expense_pk
  return JsonResponse({'status': 'ok'})
