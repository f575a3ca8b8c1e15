import core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('daily_usage', models.FloatField(help_text='kWh/day', validators=[core.validators.validate_positive])),
                ('monthly_usage', models.FloatField(help_text='kWh/month', validators=[core.validators.validate_positive])),
                ('system_size', models.FloatField(help_text='kWp', validators=[core.validators.validate_positive])),
                ('estimated_cost', models.FloatField(help_text='KSh', validators=[core.validators.validate_positive])),
                ('monthly_savings', models.FloatField(help_text='KSh/month')),
                ('payback_period', models.FloatField(help_text='Years', validators=[core.validators.validate_non_negative])),
                ('appliances', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('county', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='projects', to='catalog.county')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='solar_projects', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
