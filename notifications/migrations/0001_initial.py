from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='DeliveryLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('theme', models.CharField(choices=[('alert', 'New mission alert'), ('waiting', 'Request received'), ('accepted', 'Mission accepted'), ('unavailable', 'Hero unavailable'), ('completed', 'Mission completed'), ('welcome', 'Hero welcome'), ('onboarding', 'Hero onboarding'), ('application_admin', 'New application (admin)'), ('application_received', 'Application received'), ('application_rejected', 'Application rejected'), ('profile_update', 'Profile update pending')], db_index=True, max_length=32)),
                ('recipient', models.CharField(max_length=254)),
                ('subject', models.CharField(blank=True, max_length=255)),
                ('status', models.CharField(choices=[('sent', 'Sent'), ('failed', 'Failed')], max_length=10)),
                ('error_type', models.CharField(blank=True, max_length=100)),
                ('error_message', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                'verbose_name': 'Delivery Log',
                'verbose_name_plural': 'Delivery Logs',
                'ordering': ['-created_at'],
            },
        ),
    ]
