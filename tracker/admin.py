"""
Django admin registrations for the tracker models.

Exposes users, profiles and medications at ``/admin/`` for inspection and
manual correction during development.
"""

from django.contrib import admin

from .models import Medication, Profile, User
from .services.inventory import is_low_stock


class ProfileInline(admin.TabularInline):
    model = Profile
    extra = 0
    fields = ('name', 'created_at')
    readonly_fields = ('created_at',)


class MedicationInline(admin.TabularInline):
    model = Medication
    extra = 0
    fields = ('name', 'dosage', 'current_stock', 'low_stock_threshold')


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'name', 'is_active', 'is_staff', 'created_at')
    list_filter = ('is_active', 'is_staff')
    search_fields = ('email', 'name')
    ordering = ('email',)
    # the hash is read-only here; passwords change through the auth flow
    fields = ('email', 'name', 'password', 'is_active', 'is_staff', 'is_superuser', 'last_login')
    readonly_fields = ('password', 'last_login')
    inlines = [ProfileInline]


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'user', 'created_at')
    search_fields = ('name', 'user__email')
    inlines = [MedicationInline]


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'profile', 'current_stock', 'low_stock_threshold', 'low_stock')
    search_fields = ('name', 'profile__name', 'profile__user__email')

    @admin.display(boolean=True, description='Low stock')
    def low_stock(self, obj):
        return is_low_stock(obj)
