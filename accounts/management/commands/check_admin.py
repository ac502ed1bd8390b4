"""
Management command to diagnose administrator login problems.

Checks, in order, that ADMIN_PASSWORD is configured, that the administrator
row exists, and that the configured password matches the stored hash.
"""

import os

from django.core.management.base import BaseCommand, CommandError

from accounts.models import AdminAccount

from .seed_admin import DEFAULT_ADMIN_USERNAME


class Command(BaseCommand):
    help = 'Verify that the configured administrator can log in'

    def handle(self, *args, **options):
        username = os.environ.get('ADMIN_USERNAME') or DEFAULT_ADMIN_USERNAME
        password = os.environ.get('ADMIN_PASSWORD')

        self.stdout.write("1. Environment")
        if not password:
            raise CommandError("ADMIN_PASSWORD is not set in the environment.")
        self.stdout.write(f"   target user: '{username}' (password length: {len(password)})")

        self.stdout.write("2. Database")
        admin = AdminAccount.objects.filter(username=username).first()
        if admin is None:
            raise CommandError(
                f"Administrator '{username}' does not exist. Run 'manage.py seed_admin' to create it."
            )
        self.stdout.write(f"   found: {admin.username}")

        self.stdout.write("3. Password")
        if not admin.check_password(password):
            raise CommandError(
                "ADMIN_PASSWORD does not match the stored hash. "
                "Run 'manage.py seed_admin' again after changing the environment."
            )

        self.stdout.write(self.style.SUCCESS("Login should succeed with the configured credentials."))
