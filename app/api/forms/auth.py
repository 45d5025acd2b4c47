from django import forms


class SignupForm(forms.Form):
  """
  Signup only asks for a password; the subname is generated server-side.
  """
  password = forms.CharField(
    min_length=8,
    widget=forms.PasswordInput(attrs={
      'placeholder': 'Choose a password (min 8 chars)',
      'autocomplete': 'new-password',
    }),
  )
  password_confirm = forms.CharField(widget=forms.PasswordInput())
  display_name = forms.CharField(max_length=100, required=False)
  email = forms.EmailField(required=False)

  def clean(self):
    cleaned = super().clean()
    pw = cleaned.get('password')
    pw2 = cleaned.get('password_confirm')
    if pw and pw2 and pw != pw2:
      raise forms.ValidationError('Passwords do not match.')
    return cleaned


class LoginForm(forms.Form):
  subname = forms.CharField(max_length=100)
  password = forms.CharField(widget=forms.PasswordInput())
