from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    search_fields = ('username', 'email', 'first_name', 'last_name')
    list_display = ('username', 'email', 'full_name', 'role', 'is_active', 'created_at')
    list_filter = ('role', 'is_active')
    exclude = ('password', 'user_permissions', 'groups')
