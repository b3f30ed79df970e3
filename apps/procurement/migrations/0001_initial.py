import uuid
import apps.common.validators
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ProcurementRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('produce_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Name of produce must be alpha-numeric')])),
                ('produce_type', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z\\s]+$', code='alphabetic', message='Type of produce must be alphabetic characters only'), apps.common.validators.MinimumLengthValidator(2, message='Type of produce must be at least 2 characters')])),
                ('date', models.DateField()),
                ('time', models.CharField(max_length=20)),
                ('tonnage', models.IntegerField(validators=[apps.common.validators.MinimumValueValidator(100, message='Tonnage must be at least 100')])),
                ('cost', models.IntegerField(validators=[apps.common.validators.MinimumValueValidator(10000, message='Cost must be at least 10000')])),
                ('selling_price', models.IntegerField(validators=[apps.common.validators.MinimumValueValidator(10000, message='Selling price must be at least 10000')])),
                ('dealer_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Dealer Name must be alpha-numeric'), apps.common.validators.MinimumLengthValidator(2, message='Dealer Name must be at least 2 characters')])),
                ('contact', models.CharField(max_length=30, validators=[django.core.validators.RegexValidator('^\\+?[0-9\\s-]{10,}$', code='phone', message='Contact must be a valid phone number')])),
                ('branch', models.CharField(choices=[('Maganjo', 'Maganjo'), ('Matugga', 'Matugga')], error_messages={'invalid_choice': 'Branch must be either Maganjo or Matugga'}, max_length=20)),
            ],
            options={
                'db_table': 'procurement_records',
                'indexes': [models.Index(fields=['branch', 'date'], name='procurement_branch_date_idx')],
            },
        ),
    ]
