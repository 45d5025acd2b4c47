"""Fan-out of activity feed entries to every member of a group."""
from api.models import Activity, GroupMember


def record_group_activity(group, action_type, message, **fields):
  """Create one Activity per current member of `group`."""
  user_ids = GroupMember.objects.filter(group=group).values_list('user_id', flat=True)
  Activity.objects.bulk_create([
    Activity(
      user_id=user_id,
      action_type=action_type,
      group_id=group.pk,
      message=message,
      **fields,
    )
    for user_id in user_ids
  ])
