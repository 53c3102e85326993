# Generated manually for the initial tickets schema

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('conferences', '0001_initial'),
        ('payments', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Ticket',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('price_cents', models.IntegerField(validators=[MinValueValidator(1)])),
                ('price_currency', models.CharField(max_length=3)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('conference', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tickets', to='conferences.conference')),
            ],
            options={
                'db_table': 'tickets',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['conference', 'created_at'], name='tickets_conf_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='TicketPurchase',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('quantity', models.IntegerField(validators=[MinValueValidator(1)])),
                ('paid', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('conference', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ticket_purchases', to='conferences.conference')),
                ('payment', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ticket_purchases', to='payments.payment')),
                ('ticket', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='purchases', to='tickets.ticket')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ticket_purchases', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'ticket_purchases',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['conference', 'user', 'paid'], name='purchases_conf_user_paid_idx'),
                    models.Index(fields=['ticket', 'paid'], name='purchases_ticket_paid_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('paid', False)), fields=('ticket', 'user', 'conference'), name='unique_unpaid_purchase_per_ticket_user'),
                ],
            },
        ),
    ]
