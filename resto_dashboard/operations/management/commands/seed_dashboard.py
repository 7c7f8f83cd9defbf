from django.core.management.base import BaseCommand
from django.core.management.base import CommandError
from django.core.management.base import CommandParser
from django.db import DEFAULT_DB_ALIAS
from django.utils.translation import gettext as _

from resto_dashboard.operations.seed import seed_database
from resto_dashboard.operations.seed import wait_for_store
from resto_dashboard.operations.store import RecordStore


class Command(BaseCommand):
    help = _("Create the admin login and sample dashboard records if missing")

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help="Database alias to seed (default: %(default)s)",
        )

    def handle(self, *args, **options):
        store = RecordStore(using=options["database"])
        if not wait_for_store(store.using):
            msg = "Database unavailable; nothing seeded"
            raise CommandError(msg)
        if seed_database(store):
            self.stdout.write(self.style.SUCCESS("Seeded admin user and sample records"))
        else:
            self.stdout.write("Admin user already exists; seed skipped")
