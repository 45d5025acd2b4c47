import json
from decimal import Decimal, InvalidOperation

from django import forms

from api.models import Expense
from api.utils.splits import SplitError, build_splits


class ExpenseForm(forms.Form):
  """
  Form for adding or editing an expense.

  `participants` is a JSON list of {"user_id": int, "percentage": number}
  objects for the members sharing the expense. The form is bound to the
  group's member ids so the payer and every participant are checked
  against the group, and `cleaned_data['splits']` holds the generated
  (user_id, amount) pairs.
  """

  description = forms.CharField(
    max_length=500,
    widget=forms.TextInput(attrs={
      'placeholder': 'What was it for?',
    }),
  )
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
  payer_id = forms.IntegerField(widget=forms.HiddenInput())
  split_type = forms.ChoiceField(
    choices=Expense.SplitType.choices,
    initial=Expense.SplitType.EQUALLY,
    widget=forms.Select(),
  )
  category = forms.ChoiceField(
    choices=Expense.Category.choices,
    initial=Expense.Category.GENERAL,
    required=False,
  )
  participants = forms.CharField(widget=forms.HiddenInput())

  def __init__(self, *args, member_ids=(), **kwargs):
    super().__init__(*args, **kwargs)
    self.member_ids = set(member_ids)

  def clean_payer_id(self):
    payer_id = self.cleaned_data['payer_id']
    if payer_id not in self.member_ids:
      raise forms.ValidationError('Payer must be a member of the group.')
    return payer_id

  def clean_participants(self):
    try:
      raw = json.loads(self.cleaned_data['participants'])
    except json.JSONDecodeError:
      raise forms.ValidationError('Participants must be valid JSON.')
    if not isinstance(raw, list):
      raise forms.ValidationError('Participants must be a list.')

    participants = []
    seen = set()
    for entry in raw:
      if not isinstance(entry, dict) or 'user_id' not in entry:
        raise forms.ValidationError('Each participant needs a user_id.')
      if entry.get('checked', True) is False:
        continue
      try:
        user_id = int(entry['user_id'])
      except (TypeError, ValueError):
        raise forms.ValidationError('Invalid participant selected.')
      if user_id not in self.member_ids:
        raise forms.ValidationError('Invalid participant selected.')
      if user_id in seen:
        raise forms.ValidationError('Each participant can only be listed once.')
      seen.add(user_id)

      percentage = entry.get('percentage')
      if percentage is not None:
        try:
          percentage = Decimal(str(percentage))
        except InvalidOperation:
          raise forms.ValidationError('Percentages must be numbers.')
        if not percentage.is_finite():
          raise forms.ValidationError('Percentages must be numbers.')
      participants.append({'user_id': user_id, 'percentage': percentage})

    if not participants:
      raise forms.ValidationError('At least one participant must be selected.')
    return participants

  def clean(self):
    cleaned = super().clean()
    amount = cleaned.get('amount')
    split_type = cleaned.get('split_type')
    participants = cleaned.get('participants')
    if not cleaned.get('category'):
      cleaned['category'] = Expense.Category.GENERAL
    if amount is None or not split_type or not participants:
      return cleaned

    try:
      cleaned['splits'] = build_splits(amount, split_type, participants)
    except SplitError as e:
      raise forms.ValidationError(str(e))

    cleaned['percentages'] = {
      p['user_id']: p.get('percentage')
      for p in participants
    } if split_type == Expense.SplitType.PERCENTAGE else {}
    return cleaned
