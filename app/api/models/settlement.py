from django.conf import settings
from django.db import models
from django.utils import timezone


class Settlement(models.Model):
  """
  A direct payment from `payer` to `receiver` recorded after the fact.
  Immutable once created.
  """
  group = models.ForeignKey(
    'api.Group',
    on_delete=models.CASCADE,
    related_name='settlements',
  )
  payer = models.ForeignKey(
    settings.AUTH_USER_MODEL,
    on_delete=models.CASCADE,
    related_name='sent_settlements',
  )
  receiver = models.ForeignKey(
    settings.AUTH_USER_MODEL,
    on_delete=models.CASCADE,
    related_name='received_settlements',
  )
  amount = models.DecimalField(max_digits=12, decimal_places=2)
  description = models.CharField(max_length=500, blank=True, default='')
  settled_at = models.DateTimeField(default=timezone.now)

  class Meta:
    app_label = 'api'
    ordering = ['-settled_at']

  def __str__(self):
    return f'{self.payer.subname} -> {self.receiver.subname} ({self.amount})'
