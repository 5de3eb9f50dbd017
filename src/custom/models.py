import uuid

from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from . import managers


class CustomUser( AbstractBaseUser, PermissionsMixin ):
    """
    Account keyed on email, with a uuid as the identifier exposed through
    the API.  Superusers are system administrators: they act as owner on
    every travel plan without holding a membership.
    """
    objects = managers.CustomUserManager()

    uuid = models.UUIDField(
        'UUID',
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    email = models.EmailField(
        _('email address'),
        unique = True,
        null = True,
        blank = True,
    )
    first_name = models.CharField( _('first name'), max_length = 150, blank = True )
    last_name = models.CharField( _('last name'), max_length = 150, blank = True )
    is_staff = models.BooleanField(
        _('staff status'),
        default = False,
        help_text = _('Can log into the admin site.'),
    )
    is_active = models.BooleanField(
        _('active'),
        default = True,
        help_text = _('Inactive accounts cannot log in and lose system administrator rights.'),
    )
    date_joined = models.DateTimeField( _('date joined'), default = timezone.now )

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = _('user')
        verbose_name_plural = _('users')

    def __str__(self):
        return self.email or str( self.uuid )

    def get_full_name(self):
        return f'{self.first_name} {self.last_name}'.strip()

    @property
    def display_name(self) -> str:
        """ How other plan members see this user in notifications. """
        if self.get_full_name():
            return self.get_full_name()
        if self.email:
            return self.email.split( '@' )[0]
        return 'Someone'

    @property
    def is_system_admin(self) -> bool:
        return bool( self.is_active and self.is_superuser )
