from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.users.models import User


class Command(BaseCommand):
    help = 'Create a portal administrator, or grant the admin role to an existing user'

    def add_arguments(self, parser):
        parser.add_argument('email', help='Email address of the administrator')
        parser.add_argument(
            '--password',
            help='Password for a new account (required when the user does not exist)',
        )

    def handle(self, *args, **options):
        email = options['email']
        password = options.get('password')

        user = User.objects.filter(email__iexact=email).first()
        if user is not None:
            if user.role == User.Role.ADMIN:
                self.stdout.write(self.style.WARNING(f'{user.email} is already an administrator'))
                return
            user.role = User.Role.ADMIN
            user.is_staff = True
            user.save(update_fields=['role', 'is_staff'])
            self.stdout.write(self.style.SUCCESS(f'Granted the admin role to {user.email}'))
            return

        if not password:
            raise CommandError('--password is required to create a new administrator')
        try:
            validate_password(password)
        except ValidationError as e:
            raise CommandError(' '.join(e.messages))

        user = User.objects.create_user(
            email=email,
            password=password,
            role=User.Role.ADMIN,
            is_staff=True,
        )
        self.stdout.write(self.style.SUCCESS(f'Administrator {user.email} created'))
