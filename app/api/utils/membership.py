"""Group lookup and membership checks shared by the API views."""
from django.http import JsonResponse

from api.models import Group, GroupMember


def get_membership(user, group):
  return GroupMember.objects.filter(group=group, user=user).first()


def resolve_group(request, group_id, admin_only=False):
  """
  Look up a group the requester may act on.

  Returns:
    (group, membership, None) on success, or
    (None, None, JsonResponse) with a 404/403 error to return as-is
  """
  group = Group.objects.filter(pk=group_id).first()
  if not group:
    return None, None, JsonResponse({'error': 'Group not found'}, status=404)

  membership = get_membership(request.user, group)
  if not membership:
    return None, None, JsonResponse({'error': 'Not a member of this group'}, status=403)

  if admin_only and membership.role != GroupMember.Role.ADMIN:
    return None, None, JsonResponse({'error': 'Only group admins can do that'}, status=403)

  return group, membership, None
