import logging

from django.contrib.auth import authenticate, login, logout
from django.http import JsonResponse
from django.views.decorators.http import require_POST

from api.forms.auth import LoginForm, SignupForm
from api.models import User

logger = logging.getLogger('wide_event')


def _user_as_dict(user):
  return {'user_id': user.pk, 'subname': user.subname, 'display_name': user.label}


@require_POST
def signup_view(request):
  """Create an account with a generated subname and log it in."""
  form = SignupForm(request.POST)
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  user = User.objects.create_user(
    password=form.cleaned_data['password'],
    display_name=form.cleaned_data['display_name'],
    email=form.cleaned_data['email'],
  )
  login(request, user)
  request._wide_event['extra']['signup_subname'] = user.subname
  return JsonResponse(_user_as_dict(user), status=201)


@require_POST
def login_view(request):
  form = LoginForm(request.POST)
  if not form.is_valid():
    return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

  user = authenticate(
    request,
    username=form.cleaned_data['subname'],
    password=form.cleaned_data['password'],
  )
  if user is None:
    return JsonResponse({'error': 'Invalid subname or password.'}, status=401)

  login(request, user)
  request._wide_event['extra']['login_subname'] = user.subname
  return JsonResponse(_user_as_dict(user))


@require_POST
def logout_view(request):
  if request.user.is_authenticated:
    request._wide_event['extra']['logout_subname'] = request.user.subname
  logout(request)
  return JsonResponse({'status': 'ok'})
