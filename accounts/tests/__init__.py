"""
Accounts App Tests

This package contains tests for:
- test_login.py: administrator and hero login
- test_guard.py: bearer token verification and role gates
- test_commands.py: seed_admin and check_admin management commands
"""
