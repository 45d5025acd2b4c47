from django.contrib import admin

from api.models import (
  Activity,
  Expense,
  ExpenseSplit,
  Group,
  GroupMember,
  Settlement,
  User,
)


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
  list_display = ['subname', 'display_name', 'email', 'is_active', 'created_at']
  search_fields = ['subname', 'display_name', 'email']
  list_filter = ['is_active', 'is_staff']
  readonly_fields = ['created_at', 'updated_at']


class GroupMemberInline(admin.TabularInline):
  model = GroupMember
  extra = 0


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
  list_display = ['id', 'name', 'creator', 'updated_at']
  search_fields = ['name', 'creator__subname']
  inlines = [GroupMemberInline]


class ExpenseSplitInline(admin.TabularInline):
  model = ExpenseSplit
  extra = 0


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
  list_display = ['id', 'group', 'payer', 'amount', 'category', 'created_at']
  search_fields = ['payer__subname', 'description']
  list_filter = ['split_type', 'category']
  inlines = [ExpenseSplitInline]


@admin.register(Settlement)
class SettlementAdmin(admin.ModelAdmin):
  list_display = ['id', 'group', 'payer', 'receiver', 'amount', 'settled_at']
  search_fields = ['payer__subname', 'receiver__subname']


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
  list_display = ['user', 'action_type', 'message', 'created_at']
  search_fields = ['user__subname', 'message']
  list_filter = ['action_type']
