# Generated manually for the sequence counter table

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Secuencia',
            fields=[
                ('clave', models.CharField(max_length=100, primary_key=True, serialize=False)),
                ('valor', models.BigIntegerField(default=0)),
            ],
            options={
                'db_table': 'secuencias',
                'ordering': ['clave'],
            },
        ),
    ]
