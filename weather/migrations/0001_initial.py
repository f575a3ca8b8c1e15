import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PVGISData',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('raw_data', models.TextField(verbose_name='Raw JSON payload')),
                ('irradiance', models.FloatField(verbose_name='Average daily irradiation (kWh/m²/day)')),
                ('peak_sun_hours', models.FloatField(verbose_name='Peak sun hours (h/day)')),
                ('monthly_data', models.JSONField(default=list, verbose_name='Monthly daily irradiation')),
                ('is_valid', models.BooleanField(default=True, verbose_name='Cache valid')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('expires_at', models.DateTimeField(blank=True, null=True, verbose_name='Cache expiry')),
                ('county', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='pvgis_data', to='catalog.county')),
            ],
            options={
                'verbose_name': 'PVGIS data',
                'verbose_name_plural': 'PVGIS data',
                'ordering': ['-created_at'],
            },
        ),
    ]
