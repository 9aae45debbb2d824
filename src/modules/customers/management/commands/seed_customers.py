from __future__ import annotations

from datetime import date

from django.core.management.base import BaseCommand

from modules.customers.dtos import CustomerModel
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.customers.wiring import build_mediator

SEED_CUSTOMERS = [
    ("Ana", "Souza", "ana.souza@example.com", date(1988, 3, 14), "+5511912345678"),
    ("Bruno", "Lima", "bruno.lima@example.com", date(1992, 7, 2), "+5521998765432"),
    ("Carla", "Mendes", "carla.mendes@example.com", date(1979, 11, 23), ""),
    ("Daniel", "Costa", "daniel.costa@example.com", date(2001, 1, 5), "+5531987654321"),
    ("Helena", "Ferreira", "helena.ferreira@example.com", date(1995, 9, 30), ""),
]


class Command(BaseCommand):
    help = "Seed database with sample customers."

    def handle(self, *args, **options):
        service = CustomerService(build_mediator(CustomerDjangoRepository()))
        self.stdout.write("Creating customers...")

        created = skipped = 0
        for first_name, last_name, email, date_of_birth, phone_number in SEED_CUSTOMERS:
            customer = CustomerModel(
                first_name=first_name,
                last_name=last_name,
                email=email,
                date_of_birth=date_of_birth,
                phone_number=phone_number,
            )
            try:
                service.create_customer(customer)
            except CustomerAlreadyExists:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, skipped={skipped}"
            )
        )
