"""
Notifications App for SuperFix.

Themed, fire-and-forget email notifications for clients, heroes and
headquarters.

Usage:
    from notifications.catalog import Theme
    from notifications.dispatcher import get_dispatcher

    get_dispatcher().dispatch(Theme.WAITING, recipient='client@example.com')
"""
