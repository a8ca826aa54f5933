from django.db import migrations


def seed(apps, schema_editor):
    from apps.catalogo.services.points_of_sale import seed_points_of_sale

    seed_points_of_sale(apps.get_model('catalogo', 'PuntoVenta'))


class Migration(migrations.Migration):

    dependencies = [
        ('catalogo', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed, migrations.RunPython.noop),
    ]
