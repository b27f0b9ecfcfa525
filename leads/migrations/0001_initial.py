# Generated migration for Lead, WebhookLog, WebhookError and UserCredential models

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.CharField(db_index=True, max_length=128)),
                ('contact_id', models.TextField(blank=True, db_index=True, default='')),
                ('date_created', models.TextField()),
                ('lead_name', models.TextField()),
                ('lead_phone', models.TextField()),
                ('origin', models.TextField()),
                ('medium', models.TextField()),
                ('source', models.CharField(max_length=100)),
                ('campaign', models.TextField()),
                ('ad_id', models.TextField(blank=True, default='')),
                ('media_type', models.TextField(blank=True, default='')),
                ('ad_link', models.TextField(blank=True, default='')),
                ('ad_thumbnail', models.TextField(blank=True, default='')),
                ('ad_video', models.TextField(blank=True, default='')),
                ('ad_title', models.TextField(blank=True, default='')),
                ('ad_description', models.TextField(blank=True, default='')),
                ('ctwa_click_id', models.TextField(blank=True, default='')),
                ('workflow', models.TextField(blank=True, default='')),
                ('raw_payload', models.JSONField(blank=True, null=True)),
                ('meta_api_response', models.JSONField(blank=True, default=list)),
                ('meta_api_request_url', models.TextField(blank=True, default='')),
                ('received_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('status', models.CharField(choices=[('Aberto', 'Open'), ('Ganho', 'Won'), ('Perdido', 'Lost'), ('Abandonado', 'Abandoned')], db_index=True, default='Aberto', max_length=20)),
            ],
            options={
                'ordering': ['-received_at'],
            },
        ),
        migrations.CreateModel(
            name='WebhookLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.CharField(db_index=True, max_length=128)),
                ('lead_name', models.TextField(blank=True, default='')),
                ('payload', models.JSONField(blank=True, null=True)),
                ('received_at', models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                'ordering': ['-received_at'],
            },
        ),
        migrations.CreateModel(
            name='WebhookError',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.CharField(blank=True, db_index=True, default='', max_length=128)),
                ('error', models.TextField()),
                ('payload', models.TextField(blank=True, default='')),
                ('received_at', models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                'ordering': ['-received_at'],
            },
        ),
        migrations.CreateModel(
            name='UserCredential',
            fields=[
                ('user_id', models.CharField(max_length=128, primary_key=True, serialize=False)),
                ('meta_access_token', models.TextField(blank=True, default='')),
                ('whitelabel_domain', models.CharField(blank=True, default='', max_length=255)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.AddIndex(
            model_name='lead',
            index=models.Index(fields=['user_id', 'contact_id'], name='leads_lead_user_contact_idx'),
        ),
    ]
