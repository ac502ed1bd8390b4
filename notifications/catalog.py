"""
Notification Catalog - Themes, message templates and flavor text.

Every outbound email belongs to a Theme. A theme's MessageTemplate supplies
the subject, the headline, an optional body and the call-to-action label.
Themes without a fixed body draw one line at random from their flavor pool.

Both tables are read-only mappings; a dispatcher that needs different copy
is constructed with its own tables instead of patching these.
"""

from dataclasses import dataclass
from types import MappingProxyType

from django.db import models


class Theme(models.TextChoices):
    """Notification themes, one per kind of outbound message."""

    ALERT = 'alert', 'New mission alert'
    WAITING = 'waiting', 'Request received'
    ACCEPTED = 'accepted', 'Mission accepted'
    UNAVAILABLE = 'unavailable', 'Hero unavailable'
    COMPLETED = 'completed', 'Mission completed'
    WELCOME = 'welcome', 'Hero welcome'
    ONBOARDING = 'onboarding', 'Hero onboarding'
    APPLICATION_ADMIN = 'application_admin', 'New application (admin)'
    APPLICATION_RECEIVED = 'application_received', 'Application received'
    APPLICATION_REJECTED = 'application_rejected', 'Application rejected'
    PROFILE_UPDATE = 'profile_update', 'Profile update pending'


@dataclass(frozen=True)
class MessageTemplate:
    """Static copy for one theme. An empty body means "pick flavor text"."""
    subject: str
    title: str
    body: str = ''
    cta_text: str = ''


DEFAULT_TEMPLATES = MappingProxyType({
    Theme.ALERT: MessageTemplate(
        subject='New mission in your sector',
        title='Code red',
        cta_text='Open the hero portal',
    ),
    Theme.WAITING: MessageTemplate(
        subject='Your request has been logged',
        title='Confirmation',
    ),
    Theme.ACCEPTED: MessageTemplate(
        subject='Your hero is on the way',
        title='Mission accepted',
    ),
    Theme.UNAVAILABLE: MessageTemplate(
        subject='Mission update',
        title='Hero unavailable',
        cta_text='Find another hero',
    ),
    Theme.COMPLETED: MessageTemplate(
        subject='Mission accomplished',
        title='Case closed',
        cta_text='Leave a review',
    ),
    Theme.WELCOME: MessageTemplate(
        subject='Welcome to the League',
        title='Dossier approved: portal access',
        body=(
            'Hi {alias}, you have officially been recruited into the SuperFix League. '
            'Your hero portal credentials are below.'
        ),
        cta_text='Enter the portal',
    ),
    Theme.ONBOARDING: MessageTemplate(
        subject='Step 2: activate your public profile',
        title='Enrollment instructions',
        body=(
            'Hi {alias}! Before taking missions you need to complete your public '
            'profile. The link below is personal and does not require a login.'
        ),
        cta_text='Start enrollment',
    ),
    Theme.APPLICATION_ADMIN: MessageTemplate(
        subject='New hero application',
        title='Recruit dossier',
        body=(
            'A civilian wants to join the League. Check whether they have what it takes.\n\n'
            'Applicant message:\n"{message}"'
        ),
    ),
    Theme.APPLICATION_RECEIVED: MessageTemplate(
        subject='Application received',
        title='Stand by',
        body=(
            'Hello future hero, your dossier has reached headquarters and our agents '
            'are reviewing it. If you have the X factor, we will be in touch.'
        ),
    ),
    Theme.APPLICATION_REJECTED: MessageTemplate(
        subject='Application status',
        title='Dossier declined',
        body=(
            'Hi {name}, thank you for your interest in the SuperFix League. '
            'Your profile does not match our operational needs right now, '
            'or all places are taken.'
        ),
        cta_text='Back to the site',
    ),
    Theme.PROFILE_UPDATE: MessageTemplate(
        subject='Hero profile update pending',
        title='New data awaiting approval',
        body=(
            'Hero {alias} has submitted new profile data. '
            'Open the admin portal to review it.'
        ),
        cta_text='Open the admin portal',
    ),
})


DEFAULT_FLAVOR_TEXT = MappingProxyType({
    Theme.ALERT: (
        'Emergency signal received! A citizen needs your skills.',
        'The bat-signal is on. A new mission has landed in your sector.',
        'Headquarters reporting: a new case just came in.',
        'Heads up, hero! A fresh mission is waiting for you.',
        'Sirens in the distance. Someone needs a hand right now.',
        'Radar contact: a new request matches your profile.',
    ),
    Theme.WAITING: (
        'Your signal has been received. We are looking for the right hero.',
        'Message logged at headquarters. A hero will review it shortly.',
        'Request confirmed. Stay close to your phone.',
        'We have your coordinates. The hero has been alerted.',
        'Your case has been assigned a dossier number. Sit tight.',
        'The League is on it. Expect news soon.',
    ),
    Theme.ACCEPTED: (
        'Good news! The hero has accepted your mission.',
        'Mission confirmed. Help is on the way.',
        'The hero is gearing up and heading your way.',
        'Your hero accepted the call. Keep the kettle warm.',
        'Confirmed: the best agent for the job is on the case.',
        'Boots on the ground soon. The hero said yes.',
    ),
    Theme.UNAVAILABLE: (
        'Unfortunately the hero is on another mission right now.',
        'The hero had to decline this time. Other heroes are ready to help.',
        'This hero is out of range for the moment.',
        'Scheduling conflict at headquarters. Please try another hero.',
        'The hero cannot take this case, but the League is big.',
        'Out of office: the hero is recharging. Pick another agent.',
    ),
    Theme.COMPLETED: (
        'Mission accomplished! Thank you for trusting the League.',
        'Case closed. Another problem solved.',
        'The hero has reported the mission as complete.',
        'Job done. Tell us how your hero did.',
        'Peace restored. Your review helps the next citizen.',
        'All clear. The hero has filed the final report.',
    ),
})
