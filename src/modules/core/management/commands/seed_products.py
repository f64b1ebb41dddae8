from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Monitor Curvo de 49 Pulgadas", Decimal("300.00"), True),
    ("Audífonos Inalámbricos", Decimal("150.00"), True),
    ("Teclado Mecánico", Decimal("89.90"), True),
    ("Mouse Ergonómico", Decimal("49.90"), True),
    ("Webcam Full HD", Decimal("75.00"), False),
    ("Silla Gamer", Decimal("420.00"), True),
]


class Command(BaseCommand):
    help = "Seed the database with a small development product catalogue."

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for name, price, availability in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "availability": availability},
            )
            created += int(was_created)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created} created, "
                f"{len(CATALOG) - created} already present"
            )
        )
