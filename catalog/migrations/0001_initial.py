import core.validators
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Appliance',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('residential', 'Residential'), ('commercial', 'Commercial'), ('industrial', 'Industrial')], max_length=20)),
                ('power', models.PositiveIntegerField(help_text='Rated power in watts')),
                ('hourly_usage', models.FloatField(help_text='Typical hours of use per day', validators=[core.validators.validate_hours_per_day])),
                ('icon_name', models.CharField(blank=True, choices=[('lightbulb', 'Light bulb'), ('fan', 'Fan'), ('refrigerator', 'Refrigerator'), ('tv', 'Television'), ('laptop', 'Laptop'), ('air-conditioner', 'Air conditioner'), ('computer', 'Computer'), ('printer', 'Printer'), ('tool', 'Tool'), ('zap', 'Generic electrical load')], default='', max_length=30)),
                ('description', models.TextField(blank=True, default='')),
            ],
            options={
                'ordering': ['category', 'name'],
            },
        ),
        migrations.CreateModel(
            name='County',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
                ('irradiance', models.FloatField(help_text='Average solar irradiance (kWh/m²/day)', validators=[core.validators.validate_non_negative])),
                ('peak_sun_hours', models.FloatField(help_text='Average peak sun hours per day', validators=[core.validators.validate_peak_sun_hours])),
                ('latitude', models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(-90), django.core.validators.MaxValueValidator(90)])),
                ('longitude', models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(-180), django.core.validators.MaxValueValidator(180)])),
            ],
            options={
                'verbose_name_plural': 'Counties',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Installer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True, default='')),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(max_length=30)),
                ('website', models.URLField(blank=True, default='')),
                ('address', models.CharField(blank=True, default='', max_length=255)),
                ('verified', models.BooleanField(default=False)),
                ('rating', models.FloatField(blank=True, null=True, validators=[core.validators.validate_rating])),
                ('services', models.JSONField(blank=True, default=list)),
                ('counties', models.ManyToManyField(blank=True, related_name='installers', to='catalog.county')),
            ],
            options={
                'ordering': ['-verified', 'name'],
            },
        ),
    ]
