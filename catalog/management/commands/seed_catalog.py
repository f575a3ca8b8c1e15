# catalog/management/commands/seed_catalog.py
"""
Django command that seeds the reference catalog.

Usage:
    python manage.py seed_catalog
    python manage.py seed_catalog --reset  # Deletes and recreates everything (saved projects included)
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import Appliance, County, Installer
from projects.models import Project


APPLIANCES = [
    # ==================== RESIDENTIAL ====================
    {'name': 'LED Light Bulb', 'category': 'residential', 'power': 10, 'hourly_usage': 5,
     'icon_name': 'lightbulb', 'description': 'Energy efficient light bulb'},
    {'name': 'Ceiling Fan', 'category': 'residential', 'power': 75, 'hourly_usage': 8,
     'icon_name': 'fan', 'description': 'Standard ceiling fan'},
    {'name': 'Refrigerator', 'category': 'residential', 'power': 150, 'hourly_usage': 24,
     'icon_name': 'refrigerator', 'description': 'Medium-sized refrigerator'},
    {'name': 'Television (32")', 'category': 'residential', 'power': 55, 'hourly_usage': 4,
     'icon_name': 'tv', 'description': '32-inch LED TV'},
    {'name': 'Laptop', 'category': 'residential', 'power': 50, 'hourly_usage': 4,
     'icon_name': 'laptop', 'description': 'Standard laptop computer'},
    {'name': 'Air Conditioner (1 ton)', 'category': 'residential', 'power': 1000, 'hourly_usage': 6,
     'icon_name': 'air-conditioner', 'description': '1-ton air conditioner unit'},

    # ==================== COMMERCIAL ====================
    {'name': 'Office Computer', 'category': 'commercial', 'power': 150, 'hourly_usage': 8,
     'icon_name': 'computer', 'description': 'Desktop computer for office use'},
    {'name': 'Photocopier', 'category': 'commercial', 'power': 1100, 'hourly_usage': 2,
     'icon_name': 'printer', 'description': 'Standard office photocopier'},
    {'name': 'Commercial Refrigerator', 'category': 'commercial', 'power': 350, 'hourly_usage': 24,
     'icon_name': 'refrigerator', 'description': 'Commercial refrigerator unit'},

    # ==================== INDUSTRIAL ====================
    {'name': 'Industrial Motor (5hp)', 'category': 'industrial', 'power': 3700, 'hourly_usage': 6,
     'icon_name': 'tool', 'description': '5hp industrial motor'},
    {'name': 'Welding Machine', 'category': 'industrial', 'power': 4500, 'hourly_usage': 3,
     'icon_name': 'zap', 'description': 'Standard welding machine'},
]

# name: (irradiance kWh/m²/day, peak sun hours, latitude, longitude)
COUNTIES = {
    'Nairobi': (5.6, 5.2, -1.286389, 36.817223),
    'Mombasa': (5.8, 5.5, -4.05466, 39.66359),
    'Kisumu': (5.4, 5.0, -0.10221, 34.76171),
    'Nakuru': (5.7, 5.3, -0.30719, 36.07574),
    'Kiambu': (5.5, 5.2, -1.17139, 36.82417),
    'Machakos': (5.9, 5.6, -1.52233, 37.26531),
    'Kajiado': (6.1, 5.8, -1.8559, 36.7870),
    'Garissa': (6.3, 6.0, -0.45275, 39.64601),
    'Turkana': (6.4, 6.1, 3.11988, 35.59642),
}

INSTALLERS = [
    {
        'name': 'SunPower Kenya',
        'description': 'Premium solar installations for residential and commercial clients',
        'email': 'info@sunpowerkenya.com',
        'phone': '+254722111222',
        'website': 'https://www.sunpowerkenya.com',
        'address': 'Westlands, Nairobi',
        'counties': ['Nairobi', 'Kiambu', 'Machakos'],
        'services': ['Residential', 'Commercial', 'Maintenance'],
        'verified': True,
        'rating': 4.8,
    },
    {
        'name': 'GreenLight Solar',
        'description': 'Affordable solar solutions with quality components',
        'email': 'support@greenlightsolar.co.ke',
        'phone': '+254733444555',
        'website': 'https://www.greenlightsolar.co.ke',
        'address': 'Industrial Area, Nairobi',
        'counties': ['Nairobi', 'Mombasa', 'Nakuru'],
        'services': ['Residential', 'Industrial', 'Maintenance'],
        'verified': True,
        'rating': 4.5,
    },
    {
        'name': 'Mombasa Solar Experts',
        'description': 'Coast region specialists with over 10 years experience',
        'email': 'hello@mombasasolar.co.ke',
        'phone': '+254711888999',
        'website': 'https://www.mombasasolar.co.ke',
        'address': 'Nyali, Mombasa',
        'counties': ['Mombasa'],
        'services': ['Residential', 'Commercial', 'Off-grid'],
        'verified': False,
        'rating': 4.2,
    },
]


class Command(BaseCommand):
    help = 'Seeds the database with appliances, counties and installers'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Deletes all existing catalog rows before recreating them',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['reset']:
            self.stdout.write(self.style.WARNING('🗑️  Deleting existing catalog...'))
            # Projects reference counties (PROTECT)
            Project.objects.all().delete()
            Installer.objects.all().delete()
            Appliance.objects.all().delete()
            County.objects.all().delete()

        self.stdout.write(self.style.SUCCESS('🔌 Creating appliances...'))
        self.create_appliances()

        self.stdout.write(self.style.SUCCESS('🗺️  Creating counties...'))
        counties = self.create_counties()

        self.stdout.write(self.style.SUCCESS('🧰 Creating installers...'))
        self.create_installers(counties)

        self.stdout.write(
            self.style.SUCCESS(
                f'✅ Catalog ready: {Appliance.objects.count()} appliances, '
                f'{County.objects.count()} counties, {Installer.objects.count()} installers'
            )
        )

    def create_appliances(self):
        for data in APPLIANCES:
            fields = dict(data)
            name = fields.pop('name')
            appliance, created = Appliance.objects.get_or_create(name=name, defaults=fields)
            status = '✓' if created else '↻'
            self.stdout.write(f"  {status} {appliance.name}: {appliance.daily_energy_kwh:.2f} kWh/day")

    def create_counties(self):
        """Creates the counties and returns them keyed by name"""
        counties = {}
        for name, (irradiance, peak_sun_hours, latitude, longitude) in COUNTIES.items():
            county, created = County.objects.get_or_create(
                name=name,
                defaults={
                    'irradiance': irradiance,
                    'peak_sun_hours': peak_sun_hours,
                    'latitude': latitude,
                    'longitude': longitude,
                }
            )
            counties[name] = county
            status = '✓ Created' if created else '↻ Exists'
            self.stdout.write(f"  {status}: {county} ({county.peak_sun_hours} h/day)")
        return counties

    def create_installers(self, counties):
        for data in INSTALLERS:
            fields = dict(data)
            name = fields.pop('name')
            county_names = fields.pop('counties')

            installer, created = Installer.objects.get_or_create(name=name, defaults=fields)
            if created:
                installer.counties.set(counties[county_name] for county_name in county_names)

            status = '✓' if created else '↻'
            self.stdout.write(f"  {status} {installer.name}")
