import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import heroes.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Hero',
            fields=[
                ('password', models.CharField(help_text='Hashed password (NEVER plaintext)', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('username', models.CharField(max_length=150, unique=True)),
                ('alias', models.CharField(max_length=150, unique=True)),
                ('slug', models.SlugField(blank=True, max_length=160, null=True, unique=True)),
                ('email', models.EmailField(blank=True, default='', max_length=254)),
                ('phone', models.CharField(blank=True, default='', max_length=40)),
                ('category', models.CharField(blank=True, default='', max_length=100)),
                ('hourly_rate', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('description', models.TextField(blank=True, default='')),
                ('avatar_url', models.TextField(blank=True, default='')),
                ('video_url', models.TextField(blank=True, default='')),
                ('action_areas', models.JSONField(blank=True, default=list)),
                ('trust_score', models.PositiveIntegerField(default=heroes.models.default_trust_score)),
                ('missions_completed', models.PositiveIntegerField(default=0)),
            ],
            options={
                'verbose_name': 'Hero',
                'verbose_name_plural': 'Heroes',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddConstraint(
            model_name='hero',
            constraint=models.UniqueConstraint(condition=models.Q(('email', ''), _negated=True), fields=('email',), name='heroes_hero_unique_email'),
        ),
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('client_name', models.CharField(max_length=150)),
                ('rating', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('comment', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('hero', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='heroes.hero')),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
