from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.translation import gettext_lazy as _

from .forms import CustomUserChangeForm, CustomUserCreationForm
from .models import CustomUser


@admin.register( CustomUser )
class CustomUserAdmin( UserAdmin ):
    model = CustomUser
    form = CustomUserChangeForm
    add_form = CustomUserCreationForm

    list_display = ( 'email', 'display_name', 'is_system_admin', 'is_active', 'date_joined' )
    list_filter = ( 'is_superuser', 'is_active' )
    search_fields = ( 'email', 'first_name', 'last_name', 'uuid' )
    ordering = ( '-date_joined', )
    readonly_fields = ( 'uuid', 'last_login', 'date_joined' )

    add_fieldsets = (
        ( None, {
            'classes': ( 'wide', ),
            'fields': ( 'email', 'first_name', 'last_name', 'password1', 'password2' ),
        }),
    )
    fieldsets = (
        ( None, { 'fields': ( 'uuid', 'email', 'password' ) } ),
        ( _('Profile'), { 'fields': ( 'first_name', 'last_name' ) } ),
        ( _('Access'), {
            'description': _('Active superusers act as owner on every travel plan.'),
            'fields': ( 'is_active', 'is_staff', 'is_superuser' ),
        }),
        ( _('History'), { 'fields': ( 'last_login', 'date_joined' ) } ),
    )

    @admin.display( boolean = True, description = 'System admin' )
    def is_system_admin( self, obj : CustomUser ) -> bool:
        return obj.is_system_admin
