from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from unique_names_generator import get_random_name
from unique_names_generator.data import ADJECTIVES, ANIMALS


class UserManager(BaseUserManager):
  """Custom manager for User model with subname as the identifier."""

  def generate_subname(self):
    """Generate a unique subname like 'cool-tiger'."""
    for _ in range(100):
      name = get_random_name(combo=[ADJECTIVES, ANIMALS], separator='-', style='lowercase')
      if not self.filter(subname=name).exists():
        return name
    raise RuntimeError('Could not generate a unique subname after 100 attempts')

  def create_user(self, subname=None, password=None, **extra_fields):
    if not subname:
      subname = self.generate_subname()
    user = self.model(subname=subname, **extra_fields)
    if password:
      user.set_password(password)
    else:
      user.set_unusable_password()
    user.save(using=self._db)
    return user

  def create_superuser(self, subname, password=None, **extra_fields):
    extra_fields.setdefault('is_staff', True)
    extra_fields.setdefault('is_superuser', True)
    return self.create_user(subname, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
  """
  Ledger user. The subname is generated at signup when none is given
  and is how other users find you to add you to a group.
  """
  subname = models.CharField(max_length=100, unique=True)
  display_name = models.CharField(max_length=100, blank=True)
  email = models.EmailField(blank=True, default='')
  is_active = models.BooleanField(default=True)
  is_staff = models.BooleanField(default=False)
  created_at = models.DateTimeField(auto_now_add=True)
  updated_at = models.DateTimeField(auto_now=True)

  objects = UserManager()

  USERNAME_FIELD = 'subname'
  REQUIRED_FIELDS = []

  class Meta:
    app_label = 'api'

  def __str__(self):
    return self.subname

  @property
  def label(self):
    return self.display_name or self.subname
