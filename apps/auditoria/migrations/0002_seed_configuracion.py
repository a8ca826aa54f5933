from django.db import migrations


def seed(apps, schema_editor):
    from apps.auditoria.services.configuration import seed_parameters

    seed_parameters(apps.get_model('auditoria', 'ConfiguracionNormativa'))


class Migration(migrations.Migration):

    dependencies = [
        ('auditoria', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed, migrations.RunPython.noop),
    ]
