"""
Management command to execute a SQL script through the persistence adapter.

Useful for loading catalog data or one-off fixes on either engine. The
script runs atomically: if one statement fails, none are applied.

Usage:
    python manage.py run_sql_script scripts/productos.sql
    python manage.py run_sql_script scripts/productos.sql --dry-run
"""
from pathlib import Path

import sqlparse
from django.core.management.base import BaseCommand, CommandError

from apps.core.exceptions import ConflictError
from apps.core.persistence import get_adapter


class Command(BaseCommand):
    help = 'Execute a SQL script against the configured database'

    def add_arguments(self, parser):
        parser.add_argument('path', help='Path to the .sql file')
        parser.add_argument(
            '--database',
            default='default',
            help='Database alias to run the script on',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List the statements without executing them',
        )

    def handle(self, *args, **options):
        path = Path(options['path'])
        if not path.is_file():
            raise CommandError(f'File not found: {path}')

        script = path.read_text(encoding='utf-8')

        if options['dry_run']:
            statements = [s for s in sqlparse.split(script) if s.strip()]
            self.stdout.write(f'\n{len(statements)} statement(s) in {path}:\n')
            for statement in statements:
                self.stdout.write(f'  - {statement.splitlines()[0][:80]}')
            self.stdout.write(self.style.WARNING('\n--dry-run mode: No changes made.'))
            return

        db = get_adapter(options['database'])
        try:
            count = db.exec_script(script)
        except ConflictError as e:
            raise CommandError(f'Script violates a unique constraint: {e}')

        self.stdout.write(
            self.style.SUCCESS(f'✓ Executed {count} statement(s) from {path} on {db.vendor}')
        )
