from django.conf import settings
from django.db import models


class Group(models.Model):
  """A set of users sharing expenses."""
  name = models.CharField(max_length=100)
  description = models.TextField(blank=True, default='')
  creator = models.ForeignKey(
    settings.AUTH_USER_MODEL,
    on_delete=models.CASCADE,
    related_name='created_groups',
  )
  created_at = models.DateTimeField(auto_now_add=True)
  updated_at = models.DateTimeField(auto_now=True)

  class Meta:
    app_label = 'api'
    ordering = ['-updated_at']

  def __str__(self):
    return f'Group #{self.pk}: {self.name}'


class GroupMember(models.Model):

  class Role(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    MEMBER = 'member', 'Member'

  group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name='members')
  user = models.ForeignKey(
    settings.AUTH_USER_MODEL,
    on_delete=models.CASCADE,
    related_name='group_memberships',
  )
  role = models.CharField(max_length=20, choices=Role.choices, default=Role.MEMBER)
  joined_at = models.DateTimeField(auto_now_add=True)

  class Meta:
    app_label = 'api'
    ordering = ['joined_at', 'id']
    unique_together = ['group', 'user']

  def __str__(self):
    return f'{self.user.subname} in Group #{self.group_id} ({self.role})'
