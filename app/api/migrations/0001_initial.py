import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

  initial = True

  dependencies = [
    ('auth', '0012_alter_user_first_name_max_length'),
  ]

  operations = [
    migrations.CreateModel(
      name='User',
      fields=[
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('password', models.CharField(max_length=128, verbose_name='password')),
        ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
        ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
        ('subname', models.CharField(max_length=100, unique=True)),
        ('display_name', models.CharField(blank=True, max_length=100)),
        ('email', models.EmailField(blank=True, default='', max_length=254)),
        ('is_active', models.BooleanField(default=True)),
        ('is_staff', models.BooleanField(default=False)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
        ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
        ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
      ],
      options={
        'abstract': False,
      },
    ),
    migrations.CreateModel(
      name='Group',
      fields=[
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('name', models.CharField(max_length=100)),
        ('description', models.TextField(blank=True, default='')),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
        ('creator', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='created_groups', to=settings.AUTH_USER_MODEL)),
      ],
      options={
        'ordering': ['-updated_at'],
      },
    ),
    migrations.CreateModel(
      name='GroupMember',
      fields=[
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('role', models.CharField(choices=[('admin', 'Admin'), ('member', 'Member')], default='member', max_length=20)),
        ('joined_at', models.DateTimeField(auto_now_add=True)),
        ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='api.group')),
        ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='group_memberships', to=settings.AUTH_USER_MODEL)),
      ],
      options={
        'ordering': ['joined_at', 'id'],
        'unique_together': {('group', 'user')},
      },
    ),
    migrations.CreateModel(
      name='Expense',
      fields=[
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('description', models.CharField(max_length=500)),
        ('amount', models.DecimalField(decimal_places=2, max_digits=12)),
        ('category', models.CharField(choices=[('food', 'Food & Dining'), ('transportation', 'Transportation'), ('entertainment', 'Entertainment'), ('utilities', 'Utilities'), ('groceries', 'Groceries'), ('travel', 'Travel'), ('shopping', 'Shopping'), ('healthcare', 'Healthcare'), ('education', 'Education'), ('general', 'General')], default='general', max_length=30)),
        ('split_type', models.CharField(choices=[('equally', 'Equally'), ('percentage', 'Percentage')], default='equally', max_length=20)),
        ('date', models.DateTimeField(default=django.utils.timezone.now)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
        ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='expenses', to='api.group')),
        ('payer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='paid_expenses', to=settings.AUTH_USER_MODEL)),
      ],
      options={
        'ordering': ['-created_at'],
      },
    ),
    migrations.CreateModel(
      name='ExpenseSplit',
      fields=[
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('amount', models.DecimalField(decimal_places=2, max_digits=12)),
        ('percentage', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
        ('expense', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='splits', to='api.expense')),
        ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='expense_splits', to=settings.AUTH_USER_MODEL)),
      ],
      options={
        'ordering': ['id'],
      },
    ),
    migrations.CreateModel(
      name='Settlement',
      fields=[
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('amount', models.DecimalField(decimal_places=2, max_digits=12)),
        ('description', models.CharField(blank=True, default='', max_length=500)),
        ('settled_at', models.DateTimeField(default=django.utils.timezone.now)),
        ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='settlements', to='api.group')),
        ('payer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sent_settlements', to=settings.AUTH_USER_MODEL)),
        ('receiver', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='received_settlements', to=settings.AUTH_USER_MODEL)),
      ],
      options={
        'ordering': ['-settled_at'],
      },
    ),
    migrations.CreateModel(
      name='Activity',
      fields=[
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('action_type', models.CharField(choices=[('expense_added', 'Expense added'), ('expense_updated', 'Expense updated'), ('expense_deleted', 'Expense deleted'), ('settlement_recorded', 'Settlement recorded'), ('group_created', 'Group created'), ('group_updated', 'Group updated'), ('member_added', 'Member added'), ('member_removed', 'Member removed'), ('group_left', 'Left group')], max_length=50)),
        ('group_id', models.IntegerField(blank=True, null=True)),
        ('expense_id', models.IntegerField(blank=True, null=True)),
        ('settlement_id', models.IntegerField(blank=True, null=True)),
        ('metadata', models.JSONField(blank=True, default=dict)),
        ('message', models.TextField(blank=True, default='')),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to=settings.AUTH_USER_MODEL)),
      ],
      options={
        'verbose_name_plural': 'activities',
        'ordering': ['-created_at', '-id'],
      },
    ),
  ]
