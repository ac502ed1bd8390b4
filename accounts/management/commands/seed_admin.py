"""
Management command to create or reset the SuperFix administrator.

Reads ADMIN_USERNAME and ADMIN_PASSWORD from the environment unless they are
given on the command line. Running it again resets the stored password.
"""

import os

from django.core.management.base import BaseCommand, CommandError

from accounts.models import AdminAccount

DEFAULT_ADMIN_USERNAME = 'admin'
DEFAULT_ADMIN_PASSWORD = 'Admin123!'


class Command(BaseCommand):
    help = 'Create the administrator account, or reset its password if it exists'

    def add_arguments(self, parser):
        parser.add_argument(
            '--username',
            type=str,
            default=None,
            help='Administrator username (default: $ADMIN_USERNAME or "admin")'
        )
        parser.add_argument(
            '--password',
            type=str,
            default=None,
            help='Administrator password (default: $ADMIN_PASSWORD or "Admin123!")'
        )

    def handle(self, *args, **options):
        username = options['username'] or os.environ.get('ADMIN_USERNAME') or DEFAULT_ADMIN_USERNAME
        password = options['password'] or os.environ.get('ADMIN_PASSWORD') or DEFAULT_ADMIN_PASSWORD

        if not username.strip():
            raise CommandError("Administrator username cannot be blank.")

        self.stdout.write(f"Setting password for: {username}...")

        admin, created = AdminAccount.objects.get_or_create(username=username)
        admin.set_password(password)
        admin.save(update_fields=['password'])

        verb = 'created' if created else 'reset'
        self.stdout.write(self.style.SUCCESS(f"Administrator '{username}' {verb}."))
