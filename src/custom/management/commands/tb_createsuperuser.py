from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from custom.models import CustomUser


class Command( BaseCommand ):
    help = 'Create the system administrator account from DJANGO_SUPERUSER_EMAIL/PASSWORD, or reset it if present.'

    def handle( self, *args, **options ):
        email = settings.DJANGO_SUPERUSER_EMAIL
        password = settings.DJANGO_SUPERUSER_PASSWORD
        if not ( email and password ):
            raise CommandError( 'DJANGO_SUPERUSER_EMAIL and DJANGO_SUPERUSER_PASSWORD must both be set.' )

        admin_user = CustomUser.objects.filter( email__iexact = email ).first()
        if admin_user is None:
            admin_user = CustomUser.objects.create_superuser( email = email, password = password )
            self.stdout.write( self.style.SUCCESS( f'Created system administrator {admin_user}' ))
            return

        for flag_name in [ 'is_active', 'is_staff', 'is_superuser' ]:
            setattr( admin_user, flag_name, True )
            continue
        admin_user.set_password( password )
        admin_user.save()
        self.stdout.write( self.style.SUCCESS( f'Reset system administrator {admin_user}' ))
        return
