from django import forms


class GroupForm(forms.Form):
  """Form for creating or renaming a group."""
  name = forms.CharField(
    min_length=3,
    max_length=100,
    widget=forms.TextInput(attrs={
      'placeholder': 'Group name (e.g. Trip to Bali)',
    }),
  )
  description = forms.CharField(
    required=False,
    widget=forms.Textarea(attrs={
      'placeholder': 'Description (optional)',
      'rows': 2,
    }),
  )


class AddMemberForm(forms.Form):
  subname = forms.CharField(
    max_length=100,
    widget=forms.TextInput(attrs={
      'placeholder': 'Their subname (e.g. cool-tiger)',
    }),
  )
