"""
Activity feed views — paginated, newest first.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from api.models import Activity

logger = logging.getLogger('wide_event')

PAGE_SIZE = 20


@login_required(login_url='/api/auth/login/')
@require_GET
def load_more(request):
  """Load one page of the requester's activity feed."""
  try:
    page = max(int(request.GET.get('page', 1)), 1)
  except (ValueError, TypeError):
    page = 1

  offset = (page - 1) * PAGE_SIZE
  activities = Activity.objects.filter(
    user=request.user,
  ).order_by('-created_at', '-id')[offset:offset + PAGE_SIZE + 1]

  # Check if there are more items
  activity_list = list(activities)
  has_more = len(activity_list) > PAGE_SIZE
  if has_more:
    activity_list = activity_list[:PAGE_SIZE]

  request._wide_event['extra']['activity_page'] = page
  request._wide_event['extra']['activity_count'] = len(activity_list)

  return JsonResponse({
    'activities': [a.as_dict() for a in activity_list],
    'has_more': has_more,
    'next_page': page + 1 if has_more else None,
  })
