from django.core.management.base import BaseCommand, CommandError

from portfolio.seed import SeedError, seed_defaults


class Command(BaseCommand):
    help = "Seed empty portfolio collections with the default content."

    def handle(self, *args, **options):
        try:
            written = seed_defaults()
        except SeedError as exc:
            raise CommandError(f"{exc}: {exc.__cause__}") from exc

        for name, count in written.items():
            if count:
                self.stdout.write(self.style.SUCCESS(f"Seeded {count} {name}"))
            else:
                self.stdout.write(f"Skipped {name} (already populated)")
