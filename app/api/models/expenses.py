from django.conf import settings
from django.db import models
from django.utils import timezone


class Expense(models.Model):
  """
  An amount fronted by `payer` on behalf of the group. Responsibility is
  partitioned among members by the attached ExpenseSplit rows, which are
  replaced wholesale whenever the expense is edited.
  """

  class SplitType(models.TextChoices):
    EQUALLY = 'equally', 'Equally'
    PERCENTAGE = 'percentage', 'Percentage'

  class Category(models.TextChoices):
    FOOD = 'food', 'Food & Dining'
    TRANSPORTATION = 'transportation', 'Transportation'
    ENTERTAINMENT = 'entertainment', 'Entertainment'
    UTILITIES = 'utilities', 'Utilities'
    GROCERIES = 'groceries', 'Groceries'
    TRAVEL = 'travel', 'Travel'
    SHOPPING = 'shopping', 'Shopping'
    HEALTHCARE = 'healthcare', 'Healthcare'
    EDUCATION = 'education', 'Education'
    GENERAL = 'general', 'General'

  group = models.ForeignKey(
    'api.Group',
    on_delete=models.CASCADE,
    related_name='expenses',
  )
  payer = models.ForeignKey(
    settings.AUTH_USER_MODEL,
    on_delete=models.CASCADE,
    related_name='paid_expenses',
  )
  description = models.CharField(max_length=500)
  amount = models.DecimalField(max_digits=12, decimal_places=2)
  category = models.CharField(
    max_length=30,
    choices=Category.choices,
    default=Category.GENERAL,
  )
  split_type = models.CharField(
    max_length=20,
    choices=SplitType.choices,
    default=SplitType.EQUALLY,
  )
  date = models.DateTimeField(default=timezone.now)
  created_at = models.DateTimeField(auto_now_add=True)
  updated_at = models.DateTimeField(auto_now=True)

  class Meta:
    app_label = 'api'
    ordering = ['-created_at']

  def __str__(self):
    return f'Expense #{self.pk} in Group #{self.group_id} ({self.amount})'


class ExpenseSplit(models.Model):
  """One member's share of an expense."""
  expense = models.ForeignKey(Expense, on_delete=models.CASCADE, related_name='splits')
  user = models.ForeignKey(
    settings.AUTH_USER_MODEL,
    on_delete=models.CASCADE,
    related_name='expense_splits',
  )
  amount = models.DecimalField(max_digits=12, decimal_places=2)
  percentage = models.DecimalField(max_digits=5, decimal_places=2, null=True, blank=True)

  class Meta:
    app_label = 'api'
    ordering = ['id']

  def __str__(self):
    return f'{self.user.subname}: {self.amount} of Expense #{self.expense_id}'
