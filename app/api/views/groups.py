"""
Group views — group lifecycle, membership and balance summary.

Responses are JSON; the balance summary renders an HTMX partial when
requested by HTMX.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_POST

from api.forms.groups import AddMemberForm, GroupForm
from api.models import Activity, Group, GroupMember, User
from api.utils.activity import record_group_activity
from api.utils.balances import SETTLED_EPSILON, balance_for, compute_balances
from api.utils.ledger_loader import load_group_ledger
from api.utils.membership import resolve_group

logger = logging.getLogger('wide_event')


def _group_as_dict(group):
  return {
    'id': group.pk,
    'name': group.name,
    'description': group.description,
    'creator_id': group.creator_id,
    'updated_at': group.updated_at.isoformat(),
  }


def _member_as_dict(member):
  return {
    'user_id': member.user_id,
    'subname': member.user.subname,
    'display_name': member.user.label,
    'role': member.role,
  }


def _current_balance(group, user_id):
  ledger = load_group_ledger(group)
  balances = compute_balances(ledger.members, ledger.expenses, ledger.settlements)
  return balance_for(balances, user_id)


@login_required(login_url='/api/auth/login/')
@require_GET
def group_list(request):
  """Groups the current user belongs to."""
  groups = Group.objects.filter(members__user=request.user).distinct()
  return JsonResponse({'groups': [_group_as_dict(g) for g in groups]})


@login_required(login_url='/api/auth/login/')
@require_POST
def create(request):
  """Create a new group with the requester as its admin."""
  form = GroupForm(request.POST)
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  with transaction.atomic():
    group = Group.objects.create(
      name=form.cleaned_data['name'],
      description=form.cleaned_data['description'],
      creator=request.user,
    )
    GroupMember.objects.create(
      group=group,
      user=request.user,
      role=GroupMember.Role.ADMIN,
    )

  record_group_activity(
    group,
    Activity.ActionType.GROUP_CREATED,
    f'Created group "{group.name}"',
  )

  request._wide_event['extra']['group_created'] = group.pk
  return JsonResponse(_group_as_dict(group), status=201)


@login_required(login_url='/api/auth/login/')
@require_POST
def update(request, group_id):
  """Rename or re-describe a group (admins only)."""
  group, _, error = resolve_group(request, group_id, admin_only=True)
  if error:
    return error

  form = GroupForm(request.POST)
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  group.name = form.cleaned_data['name']
  group.description = form.cleaned_data['description']
  group.save()

  record_group_activity(
    group,
    Activity.ActionType.GROUP_UPDATED,
    f'Updated group "{group.name}"',
  )
  return JsonResponse(_group_as_dict(group))


@login_required(login_url='/api/auth/login/')
@require_POST
def delete(request, group_id):
  """Delete a group and everything recorded in it (admins only)."""
  group, _, error = resolve_group(request, group_id, admin_only=True)
  if error:
    return error

  request._wide_event['extra']['group_deleted'] = group.pk
  group.delete()
  return JsonResponse({'status': 'ok'})


@login_required(login_url='/api/auth/login/')
@require_GET
def members(request, group_id):
  """List group members."""
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  member_list = group.members.select_related('user')
  return JsonResponse({'members': [_member_as_dict(m) for m in member_list]})


@login_required(login_url='/api/auth/login/')
@require_POST
def add_member(request, group_id):
  """Add an existing user to the group by subname."""
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  form = AddMemberForm(request.POST)
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  subname = form.cleaned_data['subname'].strip()
  user = User.objects.filter(subname=subname).first()
  if not user:
    return JsonResponse({'error': 'User not found'}, status=404)

  if GroupMember.objects.filter(group=group, user=user).exists():
    return JsonResponse({'error': 'User is already a member of this group'}, status=409)

  member = GroupMember.objects.create(group=group, user=user)
  group.save(update_fields=['updated_at'])

  record_group_activity(
    group,
    Activity.ActionType.MEMBER_ADDED,
    f'{request.user.label} added {user.label} to "{group.name}"',
  )

  request._wide_event['extra']['member_added'] = user.subname
  return JsonResponse(_member_as_dict(member), status=201)


@login_required(login_url='/api/auth/login/')
@require_POST
def remove_member(request, group_id, user_id):
  """Remove another member (admins only). Their balance must be settled."""
  group, _, error = resolve_group(request, group_id, admin_only=True)
  if error:
    return error

  if user_id == request.user.pk:
    return JsonResponse({'error': 'Use leave to remove yourself'}, status=400)

  member = GroupMember.objects.filter(group=group, user_id=user_id).select_related('user').first()
  if not member:
    return JsonResponse({'error': 'Member not found'}, status=404)

  balance = _current_balance(group, user_id)
  if abs(balance) > SETTLED_EPSILON:
    logger.info(f'remove_member refused: user={user_id} balance={balance}')
    return JsonResponse({'error': 'Member cannot be removed until their balance is settled'}, status=400)

  record_group_activity(
    group,
    Activity.ActionType.MEMBER_REMOVED,
    f'{request.user.label} removed {member.user.label} from "{group.name}"',
  )
  member.delete()

  return JsonResponse({'status': 'ok'})


@login_required(login_url='/api/auth/login/')
@require_POST
def leave(request, group_id):
  """Leave a group. Refused while the requester still owes or is owed."""
  group, membership, error = resolve_group(request, group_id)
  if error:
    return error

  balance = _current_balance(group, request.user.pk)
  if abs(balance) > SETTLED_EPSILON:
    return JsonResponse({'error': 'You cannot leave the group until your balance is settled'}, status=400)

  record_group_activity(
    group,
    Activity.ActionType.GROUP_LEFT,
    f'{request.user.label} left "{group.name}"',
  )
  membership.delete()

  request._wide_event['extra']['group_left'] = group.pk
  return JsonResponse({'status': 'ok'})


@login_required(login_url='/api/auth/login/')
@require_GET
def balances(request, group_id):
  """Per-member net balances for a group (JSON, or HTMX partial)."""
  group, _, error = resolve_group(request, group_id)
  if error:
    return error

  ledger = load_group_ledger(group)
  balance_list = compute_balances(ledger.members, ledger.expenses, ledger.settlements)

  request._wide_event['extra']['balance_members'] = len(balance_list)

  if request.htmx:
    return render(request, 'partials/balance_summary.html', {
      'group': group,
      'balances': balance_list,
      'current_user_id': request.user.pk,
    })

  return JsonResponse({
    'group_id': group.pk,
    'balances': [b.as_dict() for b in balance_list],
  })
