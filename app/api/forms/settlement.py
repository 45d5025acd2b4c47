from decimal import Decimal

from django import forms


class SettlementForm(forms.Form):
  """Record a payment from the current user to another group member."""
  receiver_id = forms.IntegerField(widget=forms.HiddenInput())
  amount = forms.DecimalField(
    max_digits=12,
    decimal_places=2,
    min_value=Decimal('0.01'),
    widget=forms.NumberInput(attrs={
      'placeholder': '0.00',
      'step': '0.01',
      'min': '0.01',
    }),
  )
  description = forms.CharField(
    max_length=500,
    required=False,
    widget=forms.TextInput(attrs={
      'placeholder': 'Note (optional)',
    }),
  )
