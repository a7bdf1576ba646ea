"""PostgreSQL exclusion constraint against overlapping bookings.

Two bookings of one spot may not share a day: ``daterange(..., '[]')``
includes both bounds, so a checkout day equal to a check-in day collides.
Other backends rely on the admission transaction alone.
"""

from django.db import migrations

CREATE_SQL = [
    "CREATE EXTENSION IF NOT EXISTS btree_gist",
    (
        "ALTER TABLE bookings_booking ADD CONSTRAINT booking_no_overlap "
        "EXCLUDE USING gist (spot_id WITH =, daterange(start_date, end_date, '[]') WITH &&)"
    ),
]
DROP_SQL = "ALTER TABLE bookings_booking DROP CONSTRAINT IF EXISTS booking_no_overlap"


def add_exclusion_constraint(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    for statement in CREATE_SQL:
        schema_editor.execute(statement)


def drop_exclusion_constraint(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    # btree_gist stays installed: other indexes may depend on it
    schema_editor.execute(DROP_SQL)


class Migration(migrations.Migration):

    dependencies = [
        ("bookings", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(add_exclusion_constraint, drop_exclusion_constraint),
    ]
