"""
Create a demo account with a profile and a few medications.

Idempotent: running it again resets the demo password and tops the
medications back up to their seeded stock.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from tracker.models import Medication, Profile, User
from tracker.services.credentials import normalize_email

DEMO_EMAIL = 'demo@example.com'
DEMO_PASSWORD = 'secret1'

DEMO_MEDICATIONS = [
    # name, dosage, stock, threshold, take time, frequency
    ('Aspirin', '100 mg', 30, 5, '08:00', 'daily'),
    ('Metformin', '500 mg', 4, 10, '08:00, 20:00', 'twice daily'),
    ('Vitamin D', '1000 IU', 0, 5, None, 'weekly'),
]


class Command(BaseCommand):
    help = 'Ensure a demo user with sample medications exists.'

    def add_arguments(self, parser):
        parser.add_argument('--email', default=DEMO_EMAIL)
        parser.add_argument('--password', default=DEMO_PASSWORD)
        parser.add_argument('--profile', default='Mom', help='name of the demo profile')

    @transaction.atomic
    def handle(self, *args, **opts):
        email = normalize_email(opts['email'])
        user = User.objects.filter(email=email).first()
        if user is None:
            user = User.objects.create_user(email=email, password=opts['password'], name='Demo')
            self.stdout.write(f'created user {email}')
        else:
            user.set_password(opts['password'])
            user.is_active = True
            user.save(update_fields=['password', 'is_active'])

        profile, _ = Profile.objects.get_or_create(user=user, name=opts['profile'])
        for name, dosage, stock, threshold, take_time, frequency in DEMO_MEDICATIONS:
            Medication.objects.update_or_create(
                profile=profile,
                name=name,
                defaults={
                    'dosage': dosage,
                    'current_stock': stock,
                    'low_stock_threshold': threshold,
                    'take_time': take_time,
                    'frequency': frequency,
                },
            )
        self.stdout.write(self.style.SUCCESS(
            f'ok: {email} / profile "{profile.name}" (#{profile.id}) with {len(DEMO_MEDICATIONS)} medications'
        ))
