from django.conf import settings
from django.db import models


class Activity(models.Model):
  """
  Activity feed entries. Each action (expense added, settlement recorded,
  member joined, etc.) creates an Activity record for the relevant user.
  """

  class ActionType(models.TextChoices):
    EXPENSE_ADDED = 'expense_added', 'Expense added'
    EXPENSE_UPDATED = 'expense_updated', 'Expense updated'
    EXPENSE_DELETED = 'expense_deleted', 'Expense deleted'
    SETTLEMENT_RECORDED = 'settlement_recorded', 'Settlement recorded'
    GROUP_CREATED = 'group_created', 'Group created'
    GROUP_UPDATED = 'group_updated', 'Group updated'
    MEMBER_ADDED = 'member_added', 'Member added'
    MEMBER_REMOVED = 'member_removed', 'Member removed'
    GROUP_LEFT = 'group_left', 'Left group'

  user = models.ForeignKey(
    settings.AUTH_USER_MODEL,
    on_delete=models.CASCADE,
    related_name='activities',
  )
  action_type = models.CharField(max_length=50, choices=ActionType.choices)
  group_id = models.IntegerField(null=True, blank=True)
  expense_id = models.IntegerField(null=True, blank=True)
  settlement_id = models.IntegerField(null=True, blank=True)
  metadata = models.JSONField(default=dict, blank=True)
  message = models.TextField(blank=True, default='')
  created_at = models.DateTimeField(auto_now_add=True)

  class Meta:
    app_label = 'api'
    ordering = ['-created_at', '-id']
    verbose_name_plural = 'activities'

  def __str__(self):
    return f'{self.user.subname}: {self.action_type} ({self.created_at:%Y-%m-%d})'

  def as_dict(self):
    return {
      'id': self.pk,
      'action_type': self.action_type,
      'group_id': self.group_id,
      'expense_id': self.expense_id,
      'settlement_id': self.settlement_id,
      'message': self.message,
      'metadata': self.metadata,
      'created_at': self.created_at.isoformat(),
    }
